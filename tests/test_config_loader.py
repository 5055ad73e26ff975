import pytest

from huffproc.config_loader import DEFAULTS, load_config


def test_missing_default_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HUFFPROC_CONFIG", raising=False)
    assert load_config() == DEFAULTS


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("huffman:\n  debug_level: 4\nserver:\n  port: 8080\n")

    config = load_config(str(path))
    assert config["huffman"]["debug_level"] == 4
    assert config["huffman"]["read_chunk_size"] == DEFAULTS["huffman"]["read_chunk_size"]
    assert config["server"]["port"] == 8080
    assert config["server"]["host"] == DEFAULTS["server"]["host"]


def test_defaults_not_mutated(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("huffman:\n  debug_level: 4\n")
    load_config(str(path))
    assert DEFAULTS["huffman"]["debug_level"] == 0


def test_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("huffman:\n  extension: \".huff\"\n")
    monkeypatch.setenv("HUFFPROC_CONFIG", str(path))
    assert load_config()["huffman"]["extension"] == ".huff"


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yaml"))


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(str(path)) == DEFAULTS


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_bare_section_keeps_its_defaults(tmp_path):
    path = tmp_path / "bare.yaml"
    path.write_text("huffman:\nserver:\n  port: 9000\n")

    config = load_config(str(path))
    assert config["huffman"] == DEFAULTS["huffman"]
    assert config["server"]["port"] == 9000
