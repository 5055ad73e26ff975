# config_loader.py
import copy
import os

import yaml
from dotenv import load_dotenv

DEFAULT_CONFIG_PATH = os.path.join("config", "config.yaml")

DEFAULTS = {
    "huffman": {
        "debug_level": 0,
        "read_chunk_size": 4096,
        "extension": ".hf",
    },
    "server": {
        "host": "127.0.0.1",
        "port": 5000,
        "max_content_length": 16 * 1024 * 1024,
    },
}


def load_config(config_path=None):
    """
    Load the YAML configuration and merge it over DEFAULTS, section by section.

    The path is taken from ``config_path``, then the HUFFPROC_CONFIG
    environment variable (``.env`` is read first), then DEFAULT_CONFIG_PATH.
    Only an explicitly named file has to exist.
    """
    load_dotenv()
    explicit = config_path or os.getenv("HUFFPROC_CONFIG")
    path = explicit or DEFAULT_CONFIG_PATH

    config = copy.deepcopy(DEFAULTS)
    if not explicit and not os.path.exists(path):
        return config

    with open(path, "r") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    for section, values in loaded.items():
        if values is None and isinstance(config.get(section), dict):
            values = {}
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config
