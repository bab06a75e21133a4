"""
Pytest configuration and shared fixtures for multihash tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides commonly-used digests and multihash values
3. Isolates CLI tests from the user's configuration
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures.common import make_multihash  # noqa: E402
from multihash import HashAlgorithm, Multihash  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(params=list(HashAlgorithm), ids=lambda a: a.value)
def algorithm(request):
    """Every registered algorithm."""
    return request.param


@pytest.fixture
def zero_sha256():
    """sha2-256 multihash of 32 zero bytes."""
    return Multihash(HashAlgorithm.SHA2_256, 32, bytes(32))


@pytest.fixture
def sample_multihash():
    """A sha2-256 multihash with a non-trivial digest."""
    return make_multihash(HashAlgorithm.SHA2_256, seed=7)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run from an empty directory with no MULTIHASH_* variables set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for var in (
        "MULTIHASH_DEFAULT_ALGORITHM",
        "MULTIHASH_LOG_LEVEL",
        "MULTIHASH_LOG_FILE",
        "MULTIHASH_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    return tmp_path
