"""Core pool components."""

from amm_fee_bench.core.errors import (
    AMMFeeBenchError,
    InvalidPolicyError,
    InvalidReserveError,
    InvalidSequenceError,
)
from amm_fee_bench.core.interfaces import FeeModel
from amm_fee_bench.core.trade import FeePolicy, SwapResult, TradeSide
from amm_fee_bench.core.fee_models import (
    LaterSeparateFeeModel,
    OriginalFeeModel,
    SeparateFeeModel,
    get_fee_model,
)
from amm_fee_bench.core.pool import Pool

__all__ = [
    "AMMFeeBenchError",
    "InvalidPolicyError",
    "InvalidReserveError",
    "InvalidSequenceError",
    "FeeModel",
    "FeePolicy",
    "SwapResult",
    "TradeSide",
    "OriginalFeeModel",
    "SeparateFeeModel",
    "LaterSeparateFeeModel",
    "get_fee_model",
    "Pool",
]
