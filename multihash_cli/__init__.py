"""
Multihash CLI

Command-line interface for the multihash codec.

Usage:
    python -m multihash_cli encode <digest_hex> --algorithm sha2-256
    python -m multihash_cli decode <multihash_hex>
    python -m multihash_cli algorithms
"""

__version__ = "0.1.0"
