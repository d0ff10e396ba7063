import os
import sys
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so tests can import the package directly
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

_KINSHIP_ENV = (
    "KINSHIP_CONFIG",
    "KINSHIP_DEFAULT_LANGUAGE",
    "KINSHIP_DEFAULT_GENDER",
    "KINSHIP_CACHE_MAX_ENTRIES",
    "KINSHIP_LOG_LEVEL",
)


def pytest_configure(config):
    """Drop any KINSHIP_* variables from the developer's shell so tests run
    against the built-in defaults (zh, male, unbounded cache)."""
    for name in _KINSHIP_ENV:
        os.environ.pop(name, None)


@pytest.fixture
def service():
    from kinship_py.cache import ResponseCache
    from kinship_py.service import KinshipService

    return KinshipService(ResponseCache())
