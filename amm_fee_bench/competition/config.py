"""Shared configuration for scenario runs and benchmarks."""

from dataclasses import dataclass, replace
import math
import os

from amm_fee_bench.core.pool import DEFAULT_FEE_RATE
from amm_fee_bench.market.sequences import DEFAULT_SEQUENCE_LENGTH


@dataclass(frozen=True)
class BenchmarkSettings:
    initial_x: float
    initial_y: float
    fee_rate: float
    batch_size: int
    sequence_length: int

    def __post_init__(self) -> None:
        for name in ("initial_x", "initial_y"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be finite and > 0, got {value}")
        if not 0 <= self.fee_rate < 1:
            raise ValueError(f"fee_rate must be in [0, 1), got {self.fee_rate}")
        if self.batch_size < 0:
            raise ValueError(f"batch_size must be >= 0, got {self.batch_size}")
        if self.sequence_length < 0:
            raise ValueError(f"sequence_length must be >= 0, got {self.sequence_length}")

    def replace(self, **overrides) -> "BenchmarkSettings":
        """Copy with the given fields replaced; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


DEFAULT_SETTINGS = BenchmarkSettings(
    initial_x=10000.0,
    initial_y=100000.0,
    fee_rate=DEFAULT_FEE_RATE,
    batch_size=1000,
    sequence_length=DEFAULT_SEQUENCE_LENGTH,
)


def resolve_n_workers() -> int:
    """Resolve worker count from environment; sequential unless N_WORKERS is set."""
    n_workers = int(os.environ.get("N_WORKERS", "1"))
    if n_workers < 1:
        raise ValueError(f"N_WORKERS must be >= 1, got {n_workers}")
    return n_workers


def resolve_seed() -> int | None:
    """Resolve the base random seed from AMM_FEE_BENCH_SEED, if set."""
    seed = os.environ.get("AMM_FEE_BENCH_SEED")
    return int(seed) if seed else None
