"""Trade flow generation."""

from amm_fee_bench.market.sequences import (
    DEFAULT_SEQUENCE_LENGTH,
    SequenceFamily,
    SequenceSpec,
    alternating,
    full_random,
    half_split,
    mono_sell,
    round_robin_random,
)

__all__ = [
    "DEFAULT_SEQUENCE_LENGTH",
    "SequenceFamily",
    "SequenceSpec",
    "alternating",
    "full_random",
    "half_split",
    "mono_sell",
    "round_robin_random",
]
