"""
Multihash - self-describing hash values.

A multihash prefixes a pre-computed digest with a one-byte algorithm tag
and a one-byte length, so digests from different algorithms can be told
apart and validated without external context.

Usage:
    from multihash import HashAlgorithm, Multihash

    mh = Multihash.from_digest(HashAlgorithm.SHA2_256, digest)
    wire = mh.to_bytes()          # b"\\x12\\x20" + digest
    text = mh.to_hex()            # "1220..."

    assert Multihash.from_bytes(wire) == mh
    assert Multihash.from_hex(text) == mh
"""
from .algorithms import (
    AlgorithmSpec,
    HashAlgorithm,
    lookup,
    lookup_name,
    supported_algorithms,
    supported_tags,
)
from .errors import (
    ErrorCodes,
    LengthMismatchException,
    MalformedHexException,
    MultihashError,
    MultihashException,
    SizeMismatchException,
    TruncatedInputException,
    UnrecognizedAlgorithmException,
)
from .hexcodec import from_hex, to_hex
from .multihash import HEADER_SIZE, Multihash

__version__ = "0.1.0"

__all__ = [
    # Registry
    "AlgorithmSpec",
    "HashAlgorithm",
    "lookup",
    "lookup_name",
    "supported_algorithms",
    "supported_tags",
    # Value type
    "HEADER_SIZE",
    "Multihash",
    # Hex codec
    "to_hex",
    "from_hex",
    # Errors
    "ErrorCodes",
    "MultihashError",
    "MultihashException",
    "UnrecognizedAlgorithmException",
    "SizeMismatchException",
    "LengthMismatchException",
    "TruncatedInputException",
    "MalformedHexException",
]
