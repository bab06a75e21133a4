"""
Hex Codec

Text form of a binary multihash: lowercase hexadecimal, two digits per
byte, no separators and no "0x" prefix.

Rules:
- Encoding always emits lowercase, zero-padded pairs ("01", never "1")
- Decoding accepts upper and lower case digits
- Decoding rejects odd lengths and anything that is not a hex digit,
  including whitespace
"""
from __future__ import annotations

import re

from .errors import MalformedHexException


_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string.

    Args:
        data: Raw bytes

    Returns:
        Hex string without prefix

    Example:
        >>> to_hex(bytes([0x12, 0x01]))
        '1201'
    """
    return bytes(data).hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    Args:
        hex_string: Hex digits, even count, either case

    Returns:
        Decoded bytes

    Raises:
        MalformedHexException: If the string has odd length or
                               contains non-hex characters

    Example:
        >>> from_hex("DEADbeef").hex()
        'deadbeef'
    """
    if len(hex_string) % 2 != 0:
        raise MalformedHexException(
            f"Uneven number of hex digits: {len(hex_string)}",
            length=len(hex_string),
        )

    # bytes.fromhex tolerates whitespace, so check the alphabet first
    if not _HEX_DIGITS.fullmatch(hex_string):
        raise MalformedHexException(
            f"Invalid hex characters in string: {hex_string[:16]!r}",
            length=len(hex_string),
        )

    return bytes.fromhex(hex_string)


__all__ = [
    "to_hex",
    "from_hex",
]
