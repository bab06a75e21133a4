"""
Multihash CLI Commands

Each command module exposes a `<name>_cmd(args) -> int` handler.
"""

from . import algorithms, decode, encode

__all__ = ["algorithms", "decode", "encode"]
