import sys
from pathlib import Path

import pytest

# Ensure project root is importable while running tests.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from entropylab.sources import SecureRandomSource  # noqa: E402


class CountingSource(SecureRandomSource):
    """Deterministic source: 0, step, 2*step, ... as 32-bit words."""

    name = "counting"

    def __init__(self, step=1, start=0, secure=True):
        self.value = start
        self.step = step
        self.is_secure = secure

    def next_uint32(self):
        out = self.value & 0xFFFFFFFF
        self.value += self.step
        return out


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture
def make_source():
    return CountingSource
