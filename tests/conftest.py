"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed linkrecord package.
"""

import pytest
from multiformats import CID, multihash

from linkrecord.kernel.timestamp import Timestamp

# 2023-11-14T22:13:20Z
BASE_NANOS = 1_700_000_000_000_000_000


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


class FakeClock:
    """Deterministic clock: returns ``now`` until moved."""

    def __init__(self, start_nanos: int = BASE_NANOS):
        self.now = start_nanos
        self.calls = 0

    def __call__(self) -> Timestamp:
        self.calls += 1
        return Timestamp(self.now)

    def advance(self, nanos: int) -> None:
        self.now += nanos


@pytest.fixture
def clock():
    return FakeClock()


def make_cid(content: bytes) -> CID:
    """CIDv1 (raw, sha2-256) for test content."""
    return CID("base32", 1, "raw", multihash.digest(content, "sha2-256"))


@pytest.fixture
def cid_a():
    return make_cid(b"alpha")


@pytest.fixture
def cid_b():
    return make_cid(b"beta")
