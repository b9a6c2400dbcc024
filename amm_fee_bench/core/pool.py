"""Constant product pool engine with pluggable fee accounting."""

import math
from typing import Iterable, Union

from amm_fee_bench.core.errors import InvalidReserveError
from amm_fee_bench.core.fee_models import get_fee_model
from amm_fee_bench.core.trade import FeePolicy, TradeSide

DEFAULT_FEE_RATE = 0.003


def _require_positive_reserve(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidReserveError(f"{name} must be finite and > 0, got {value}")
    return value


class Pool:
    """Two-asset constant product pool (x * y = k) under one fee policy.

    The pool starts from explicit reserves and is mutated one signed trade
    at a time: a positive amount pays X in and takes Y out, a negative
    amount pays Y in and takes X out. Depending on the policy, fees are
    either re-injected into the reserves (``ORIGINAL``) or collected into
    ``fee_x`` / ``fee_y`` buckets that sit outside the curve.

    Drift is measured on reserve plus bucket, so policies that keep fees
    outside the pool are compared on the same footing as the original one.
    """

    def __init__(
        self,
        initial_x: float,
        initial_y: float,
        policy: Union[FeePolicy, str, int] = FeePolicy.ORIGINAL,
        fee_rate: float = DEFAULT_FEE_RATE,
    ) -> None:
        self._initial_x = _require_positive_reserve("initial_x", initial_x)
        self._initial_y = _require_positive_reserve("initial_y", initial_y)
        self.policy = FeePolicy.parse(policy)
        fee_rate = float(fee_rate)
        if not 0 <= fee_rate < 1:
            raise ValueError(f"fee_rate must be in [0, 1), got {fee_rate}")
        self.fee_rate = fee_rate
        self._model = get_fee_model(self.policy)

        self.x = self._initial_x
        self.y = self._initial_y
        # Fees collected outside the reserves (always 0 under ORIGINAL)
        self.fee_x = 0.0
        self.fee_y = 0.0
        self.trade_count = 0

    def __repr__(self) -> str:
        return (
            f"Pool(policy={self.policy.value}, x={self.x}, y={self.y}, "
            f"fee_x={self.fee_x}, fee_y={self.fee_y}, trades={self.trade_count})"
        )

    @property
    def initial_x(self) -> float:
        return self._initial_x

    @property
    def initial_y(self) -> float:
        return self._initial_y

    @property
    def k(self) -> float:
        """The constant product of the current reserves."""
        return self.x * self.y

    @property
    def total_x(self) -> float:
        """X held by the pool including fees collected outside the reserves."""
        return self.x + self.fee_x

    @property
    def total_y(self) -> float:
        """Y held by the pool including fees collected outside the reserves."""
        return self.y + self.fee_y

    @property
    def spot_price(self) -> float:
        """Current spot price (Y per X) before fees."""
        return self.y / self.x

    def trade(self, amount: float) -> None:
        """Apply one signed trade to the pool.

        Args:
            amount: Positive to pay X for Y, negative to pay Y for X.
                Zero leaves the reserves untouched.

        Raises:
            InvalidReserveError: If the amount is not finite, or the trade
                would leave a reserve non-positive or non-finite. The pool
                is not modified in that case.
        """
        amount = float(amount)
        if not math.isfinite(amount):
            raise InvalidReserveError(f"Trade amount must be finite, got {amount}")
        if amount == 0:
            self.trade_count += 1
            return

        if TradeSide.of(amount) is TradeSide.X_FOR_Y:
            result = self._model.swap(self.x, self.y, amount, self.fee_rate)
            new_x, new_y = result.reserve_in, result.reserve_out
            fee_x, fee_y = result.fee_in, result.fee_out
        else:
            result = self._model.swap(self.y, self.x, -amount, self.fee_rate)
            new_x, new_y = result.reserve_out, result.reserve_in
            fee_x, fee_y = result.fee_out, result.fee_in

        for name, value in (("x", new_x), ("y", new_y)):
            if not math.isfinite(value) or value <= 0:
                raise InvalidReserveError(
                    f"Trade of {amount} would leave reserve {name} at {value} "
                    f"(x={self.x}, y={self.y}, policy={self.policy.value})"
                )

        self.x = new_x
        self.y = new_y
        self.fee_x += fee_x
        self.fee_y += fee_y
        self.trade_count += 1

    def drift(self) -> tuple[float, float]:
        """Relative change of (reserve + fees) versus the initial reserves."""
        drift_x = (self.x + self.fee_x - self._initial_x) / self._initial_x
        drift_y = (self.y + self.fee_y - self._initial_y) / self._initial_y
        return drift_x, drift_y

    def simulate(self, sequence: Iterable[float]) -> tuple[float, float]:
        """Apply every trade in order and return the resulting drift.

        Args:
            sequence: Signed trade amounts

        Returns:
            (drift_x, drift_y); (0.0, 0.0) for an empty sequence on a
            fresh pool
        """
        for amount in sequence:
            self.trade(amount)
        return self.drift()
