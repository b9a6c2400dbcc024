"""Test fixtures for pool and benchmark tests."""

from tests.fixtures.pool_fixtures import (
    PoolSnapshot,
    ReserveProfile,
    create_pool,
    create_pool_set,
    get_reserves,
    snapshot_pool,
)

__all__ = [
    "PoolSnapshot",
    "ReserveProfile",
    "create_pool",
    "create_pool_set",
    "get_reserves",
    "snapshot_pool",
]
