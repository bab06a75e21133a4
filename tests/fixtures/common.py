"""
Common factories for multihash tests.
"""

from multihash import HashAlgorithm, Multihash


def make_digest(algorithm: HashAlgorithm, seed: int = 0) -> bytes:
    """Deterministic digest of the right length for an algorithm."""
    return bytes((seed + i) % 256 for i in range(algorithm.length))


def make_multihash(algorithm: HashAlgorithm = HashAlgorithm.SHA2_256, seed: int = 0) -> Multihash:
    """Valid multihash built through the primary constructor."""
    digest = make_digest(algorithm, seed)
    return Multihash(algorithm, len(digest), digest)
