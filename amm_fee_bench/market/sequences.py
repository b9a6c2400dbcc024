"""Trade sequence generators.

Random families draw integer trade magnitudes relative to the pool's
initial reserves: a ``threshold`` of 10 caps X-paying trades below
``initial_x // 10`` and Y-paying trades below ``initial_y // 10``.
Randomness always comes from an injected ``numpy.random.Generator``;
nothing in this module touches global random state.

Patterned families are deterministic fixed-size trades used to probe
one-directional and balanced flow.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from amm_fee_bench.core.errors import InvalidSequenceError

DEFAULT_SEQUENCE_LENGTH = 10000


class SequenceFamily(Enum):
    """Known trade sequence shapes."""
    FULL_RANDOM = "full_random"
    ROUND_ROBIN_RANDOM = "round_robin_random"
    MONO_SELL = "mono_sell"
    HALF_SPLIT = "half_split"
    ALTERNATING = "alternating"

    @property
    def is_random(self) -> bool:
        return self in (SequenceFamily.FULL_RANDOM, SequenceFamily.ROUND_ROBIN_RANDOM)


def _check_common(reserves: tuple[float, ...], divisor: float, length: int) -> None:
    if any(not math.isfinite(reserve) or reserve <= 0 for reserve in reserves):
        raise InvalidSequenceError(f"initial reserves must be finite and > 0, got {reserves}")
    if divisor <= 0:
        raise InvalidSequenceError(f"threshold must be > 0, got {divisor}")
    if length < 0:
        raise InvalidSequenceError(f"length must be >= 0, got {length}")


def _magnitude_bounds(initial_x: float, initial_y: float, threshold: int) -> tuple[int, int]:
    """Exclusive upper bounds for X-paying and Y-paying trade magnitudes."""
    if int(threshold) != threshold:
        raise InvalidSequenceError(f"threshold must be an integer, got {threshold}")
    threshold = int(threshold)
    high_x = int(initial_x) // threshold
    high_y = int(initial_y) // threshold
    if high_x < 1 or high_y < 1:
        raise InvalidSequenceError(
            f"threshold {threshold} leaves no trade sizes for reserves "
            f"({initial_x}, {initial_y})"
        )
    return high_x, high_y


def full_random(
    initial_x: float,
    initial_y: float,
    threshold: int,
    length: int,
    rng: np.random.Generator,
) -> list[float]:
    """Independent trades with a fair coin deciding the direction of each.

    Entry i is either a draw from [0, initial_x // threshold) or the
    negation of a draw from [0, initial_y // threshold).
    """
    _check_common((initial_x, initial_y), threshold, length)
    high_x, high_y = _magnitude_bounds(initial_x, initial_y, threshold)
    if length == 0:
        return []

    buys = rng.integers(0, high_x, size=length)
    sells = -rng.integers(0, high_y, size=length)
    pick_buy = rng.integers(0, 2, size=length) == 0
    return np.where(pick_buy, buys, sells).astype(np.float64).tolist()


def round_robin_random(
    initial_x: float,
    initial_y: float,
    threshold: int,
    length: int,
    rng: np.random.Generator,
) -> list[float]:
    """Random magnitudes with alternating direction: even index pays X,
    odd index pays Y."""
    _check_common((initial_x, initial_y), threshold, length)
    high_x, high_y = _magnitude_bounds(initial_x, initial_y, threshold)
    if length == 0:
        return []

    trades = np.empty(length, dtype=np.float64)
    trades[0::2] = rng.integers(0, high_x, size=len(trades[0::2]))
    trades[1::2] = -rng.integers(0, high_y, size=len(trades[1::2]))
    return trades.tolist()


def mono_sell(initial_y: float, divisor: float, length: int) -> list[float]:
    """Every trade pays ``initial_y / divisor`` of Y into the pool."""
    _check_common((initial_y,), divisor, length)
    return [-initial_y / divisor] * length


def half_split(
    initial_x: float,
    initial_y: float,
    divisor: float,
    length: int,
) -> list[float]:
    """First half pays X in, second half pays Y in, both of fixed size."""
    _check_common((initial_x, initial_y), divisor, length)
    half = length // 2
    return [initial_x / divisor] * half + [-initial_y / divisor] * (length - half)


def alternating(
    initial_x: float,
    initial_y: float,
    divisor: float,
    length: int,
) -> list[float]:
    """Fixed-size trades alternating X in (even index) and Y in (odd index)."""
    _check_common((initial_x, initial_y), divisor, length)
    buy = initial_x / divisor
    sell = -initial_y / divisor
    return [buy if i % 2 == 0 else sell for i in range(length)]


@dataclass(frozen=True)
class SequenceSpec:
    """A sequence family together with its size parameters."""
    family: SequenceFamily
    divisor: int
    length: int = DEFAULT_SEQUENCE_LENGTH

    def __post_init__(self) -> None:
        if self.divisor <= 0:
            raise InvalidSequenceError(f"divisor must be > 0, got {self.divisor}")
        if self.length < 0:
            raise InvalidSequenceError(f"length must be >= 0, got {self.length}")

    def with_length(self, length: int) -> "SequenceSpec":
        return SequenceSpec(family=self.family, divisor=self.divisor, length=length)

    def describe(self) -> str:
        return f"{self.family.value} 1/{self.divisor} x{self.length}"

    def generate(
        self,
        initial_x: float,
        initial_y: float,
        rng: Optional[np.random.Generator] = None,
    ) -> list[float]:
        """Build the trade sequence for pools starting at (initial_x, initial_y).

        Raises:
            InvalidSequenceError: If a random family is requested without rng
        """
        if self.family.is_random:
            if rng is None:
                raise InvalidSequenceError(f"{self.family.value} requires a random generator")
            if self.family is SequenceFamily.FULL_RANDOM:
                return full_random(initial_x, initial_y, self.divisor, self.length, rng)
            return round_robin_random(initial_x, initial_y, self.divisor, self.length, rng)

        if self.family is SequenceFamily.MONO_SELL:
            return mono_sell(initial_y, self.divisor, self.length)
        if self.family is SequenceFamily.HALF_SPLIT:
            return half_split(initial_x, initial_y, self.divisor, self.length)
        return alternating(initial_x, initial_y, self.divisor, self.length)
