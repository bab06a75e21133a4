"""
Multihash Algorithm Registry

The closed set of hash algorithms a multihash may carry. Each algorithm
has a one-byte tag and a mandated digest length; both are part of the
wire format and must never change.

| name      | tag  | digest length |
|-----------|------|---------------|
| sha1      | 0x11 | 20            |
| sha2-256  | 0x12 | 32            |
| sha2-512  | 0x13 | 64            |
| sha3      | 0x14 | 64            |
| blake2b   | 0x40 | 64            |
| blake2s   | 0x41 | 32            |

The registry is built once at import and is read-only afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .errors import UnrecognizedAlgorithmException


@dataclass(frozen=True)
class AlgorithmSpec:
    """Wire constants for one algorithm."""
    tag: int
    length: int


class HashAlgorithm(str, Enum):
    """Supported hash algorithms, valued by their canonical multihash name."""

    SHA1 = "sha1"
    SHA2_256 = "sha2-256"
    SHA2_512 = "sha2-512"
    SHA3 = "sha3"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"

    @property
    def tag(self) -> int:
        """One-byte numeric identifier."""
        return _SPECS[self].tag

    @property
    def length(self) -> int:
        """Mandated digest length in bytes."""
        return _SPECS[self].length

    def __str__(self) -> str:
        return self.value


_SPECS: Mapping[HashAlgorithm, AlgorithmSpec] = MappingProxyType({
    HashAlgorithm.SHA1: AlgorithmSpec(tag=0x11, length=20),
    HashAlgorithm.SHA2_256: AlgorithmSpec(tag=0x12, length=32),
    HashAlgorithm.SHA2_512: AlgorithmSpec(tag=0x13, length=64),
    HashAlgorithm.SHA3: AlgorithmSpec(tag=0x14, length=64),
    HashAlgorithm.BLAKE2B: AlgorithmSpec(tag=0x40, length=64),
    HashAlgorithm.BLAKE2S: AlgorithmSpec(tag=0x41, length=32),
})

_BY_TAG: Mapping[int, HashAlgorithm] = MappingProxyType(
    {spec.tag: algorithm for algorithm, spec in _SPECS.items()}
)

if len(_BY_TAG) != len(_SPECS):
    raise RuntimeError("multihash tags must be unique")


def lookup(tag: int) -> HashAlgorithm:
    """
    Resolve a tag byte to its algorithm.

    Args:
        tag: Tag as an unsigned integer (0-255)

    Returns:
        The registered HashAlgorithm

    Raises:
        UnrecognizedAlgorithmException: If the tag is not registered

    Example:
        >>> lookup(0x12)
        <HashAlgorithm.SHA2_256: 'sha2-256'>
    """
    algorithm = _BY_TAG.get(tag) if isinstance(tag, int) else None
    if algorithm is None:
        raise UnrecognizedAlgorithmException(tag=tag)
    return algorithm


def lookup_name(name: str) -> HashAlgorithm:
    """
    Resolve a canonical algorithm name (e.g. "sha2-256").

    Names are matched exactly; there is no case folding.

    Raises:
        UnrecognizedAlgorithmException: If the name is not registered
    """
    try:
        return HashAlgorithm(name)
    except ValueError:
        raise UnrecognizedAlgorithmException(name=name) from None


def supported_tags() -> frozenset[int]:
    """All registered tags."""
    return frozenset(_BY_TAG)


def supported_algorithms() -> list[HashAlgorithm]:
    """All registered algorithms, ordered by tag."""
    return [_BY_TAG[tag] for tag in sorted(_BY_TAG)]


__all__ = [
    "AlgorithmSpec",
    "HashAlgorithm",
    "lookup",
    "lookup_name",
    "supported_tags",
    "supported_algorithms",
]
