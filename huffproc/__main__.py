"""
Command-line front end.

Usage:
    python -m huffproc compress input.txt [input.txt.hf]
    python -m huffproc decompress input.txt.hf [input.txt]
"""

import argparse
import os
import sys

from .compression import Compressor
from .config_loader import load_config
from .exceptions import HuffException


def default_destination(command, src, extension):
    if command == "compress":
        return src + extension
    if src.endswith(extension):
        return src[:-len(extension)]
    return src + ".uhf"


def build_parser():
    parser = argparse.ArgumentParser(prog="huffproc", description="Huffman file compressor")
    parser.add_argument("command", choices=["compress", "decompress"])
    parser.add_argument("src", help="input file")
    parser.add_argument("dst", nargs="?", help="output file (derived from src when omitted)")
    parser.add_argument("--debug", type=int, default=None, help="debug level (1 = summary, 4 = codes)")
    parser.add_argument("--config", default=None, help="path to a YAML config file")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    dst = args.dst or default_destination(args.command, args.src, config["huffman"]["extension"])
    compressor = Compressor(debug=args.debug, config=config)

    try:
        if args.command == "compress":
            bits = compressor.compress_file(args.src, dst)
        else:
            bits = compressor.decompress_file(args.src, dst)
    except HuffException as e:
        print(f"huffproc: {args.src}: {e}", file=sys.stderr)
        return 1

    src_size = os.path.getsize(args.src)
    dst_size = os.path.getsize(dst)
    ratio = 100.0 * dst_size / src_size if src_size else 0.0
    print(f"{args.command}: {args.src} ({src_size} bytes) -> {dst} ({dst_size} bytes, {bits} bits), {ratio:.2f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
