"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from amm_fee_bench.core.pool import Pool
from amm_fee_bench.core.trade import FeePolicy
from tests.fixtures.pool_fixtures import ReserveProfile, create_pool_set, get_reserves


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "economic: Fee accounting and invariant property tests"
    )
    config.addinivalue_line(
        "markers", "edge_case: Edge case tests with extreme or invalid inputs"
    )
    config.addinivalue_line(
        "markers", "slow: Tests spawning worker processes or long sequences"
    )


# ============================================================================
# Pool Fixtures
# ============================================================================


@pytest.fixture
def reference_reserves() -> tuple[float, float]:
    """Benchmark default reserves (10000, 100000)."""
    return get_reserves(ReserveProfile.REFERENCE)


@pytest.fixture
def pool_set() -> dict[FeePolicy, Pool]:
    """One fresh pool per policy at the reference reserves."""
    return create_pool_set()


@pytest.fixture(params=list(FeePolicy), ids=lambda p: p.value)
def any_policy(request) -> FeePolicy:
    return request.param


# ============================================================================
# Seed Fixtures
# ============================================================================


@pytest.fixture
def fixed_seed() -> int:
    return 42


@pytest.fixture
def rng(fixed_seed) -> np.random.Generator:
    return np.random.default_rng(fixed_seed)


@pytest.fixture
def random_seeds() -> list[int]:
    return [42, 123, 456, 789, 1337]
