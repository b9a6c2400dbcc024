"""AMM fee policy benchmark framework."""

from amm_fee_bench.core.errors import (
    AMMFeeBenchError,
    InvalidPolicyError,
    InvalidReserveError,
    InvalidSequenceError,
)
from amm_fee_bench.core.pool import Pool
from amm_fee_bench.core.trade import FeePolicy, TradeSide

__all__ = [
    "AMMFeeBenchError",
    "InvalidPolicyError",
    "InvalidReserveError",
    "InvalidSequenceError",
    "Pool",
    "FeePolicy",
    "TradeSide",
]
