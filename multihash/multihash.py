"""
Multihash Value Type
Immutable self-describing hash value and its binary/hex codecs.

Wire format (Hard Contract):
    tag:uint8 | length:uint8 | digest:byte[length]

Invariants (enforced at construction, never relaxed):
1. size == len(digest)
2. len(digest) == algorithm.length

A Multihash can only exist in a valid state: every constructor goes
through __post_init__, and instances are frozen.
"""
from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Any, Union

from .algorithms import HashAlgorithm, lookup, lookup_name
from .errors import (
    LengthMismatchException,
    MultihashException,
    SizeMismatchException,
    TruncatedInputException,
)
from .hexcodec import from_hex as _decode_hex
from .hexcodec import to_hex as _encode_hex


logger = logging.getLogger(__name__)

# tag byte + length byte
HEADER_SIZE = 2

# largest value the size byte can hold
MAX_SIZE = 0xFF

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Multihash:
    """
    A digest tagged with the algorithm that produced it.

    Attributes:
        algorithm: The registered hash algorithm
        size: Declared digest size (0-255)
        digest: Raw digest bytes, owned by this instance
    """
    algorithm: HashAlgorithm
    size: int
    digest: bytes

    def __post_init__(self) -> None:
        """Normalize fields and enforce the invariants."""
        algorithm = self.algorithm
        if isinstance(algorithm, int) and not isinstance(algorithm, bool):
            algorithm = lookup(algorithm)
        elif not isinstance(algorithm, HashAlgorithm):
            algorithm = lookup_name(algorithm)
        digest = bytes(memoryview(self.digest))

        # size is a single unsigned byte; bools and floats are not sizes
        size = self.size
        if isinstance(size, bool):
            raise SizeMismatchException(declared=size, actual=len(digest))
        try:
            size = operator.index(size)
        except TypeError:
            raise SizeMismatchException(declared=size, actual=len(digest)) from None
        if not 0 <= size <= MAX_SIZE or size != len(digest):
            raise SizeMismatchException(declared=size, actual=len(digest))
        if len(digest) != algorithm.length:
            raise LengthMismatchException(
                actual=len(digest),
                expected=algorithm.length,
                algorithm=algorithm.value,
            )

        object.__setattr__(self, "algorithm", algorithm)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "digest", digest)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_digest(cls, algorithm: HashAlgorithm | str, digest: BytesLike) -> Multihash:
        """Wrap a digest, taking the declared size from its length."""
        return cls(algorithm, len(digest), digest)

    @classmethod
    def from_bytes(cls, data: BytesLike) -> Multihash:
        """
        Decode the binary form.

        Args:
            data: [tag][size][digest...]

        Returns:
            The decoded Multihash

        Raises:
            TruncatedInputException: If data is shorter than the 2-byte header
            UnrecognizedAlgorithmException: If the tag is not registered
            SizeMismatchException: If the size byte differs from the digest length
            LengthMismatchException: If the digest length is wrong for the algorithm
        """
        data = bytes(memoryview(data))
        if len(data) < HEADER_SIZE:
            logger.debug("Rejected multihash: %d byte(s) is shorter than the header", len(data))
            raise TruncatedInputException(length=len(data))

        try:
            return cls(lookup(data[0]), data[1], data[HEADER_SIZE:])
        except MultihashException as e:
            logger.debug("Rejected multihash (%s): %s", e.code, e.message)
            raise

    @classmethod
    def from_hex(cls, hex_string: str) -> Multihash:
        """
        Decode the hex text form.

        Raises:
            MalformedHexException: If the text is not valid hex
            (plus anything from_bytes raises)
        """
        return cls.from_bytes(_decode_hex(hex_string))

    # -------------------------------------------------------------------------
    # Encoders
    # -------------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Canonical binary form, len(digest) + 2 bytes long."""
        return bytes((self.algorithm.tag, len(self.digest))) + self.digest

    def to_hex(self) -> str:
        """Lowercase hex of to_bytes()."""
        return _encode_hex(self.to_bytes())

    def to_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm.value,
            "tag": self.algorithm.tag,
            "size": self.size,
            "digest": _encode_hex(self.digest),
            "multihash": self.to_hex(),
        }

    def __str__(self) -> str:
        return self.to_hex()


__all__ = [
    "HEADER_SIZE",
    "Multihash",
]
