"""Constant product swap rules, one per fee policy."""

from amm_fee_bench.core.errors import InvalidPolicyError
from amm_fee_bench.core.interfaces import FeeModel
from amm_fee_bench.core.trade import FeePolicy, SwapResult


class OriginalFeeModel(FeeModel):
    """Uniswap v2 accounting: the fee stays in the pool as liquidity.

    The fee is taken from the input before pricing, so the swap runs on
    (reserve_in + net)(reserve_out - out) = k, and is then added back to
    the input reserve. k grows with every trade.
    """

    policy = FeePolicy.ORIGINAL

    def swap(
        self,
        reserve_in: float,
        reserve_out: float,
        amount_in: float,
        fee_rate: float,
    ) -> SwapResult:
        k = reserve_in * reserve_out
        fee = amount_in * fee_rate
        net_in = amount_in - fee
        new_in = reserve_in + net_in
        new_out = min(k / new_in, reserve_out)
        return SwapResult(
            reserve_in=new_in + fee,
            reserve_out=new_out,
            fee_in=0.0,
            fee_out=0.0,
        )


class SeparateFeeModel(FeeModel):
    """Fee charged on the input before the trade and held outside the pool.

    Only the net input reaches the reserves, so k stays constant; the fee
    goes to the input side's bucket.
    """

    policy = FeePolicy.SEPARATE

    def swap(
        self,
        reserve_in: float,
        reserve_out: float,
        amount_in: float,
        fee_rate: float,
    ) -> SwapResult:
        k = reserve_in * reserve_out
        fee = amount_in * fee_rate
        net_in = amount_in - fee
        new_in = reserve_in + net_in
        new_out = min(k / new_in, reserve_out)
        return SwapResult(
            reserve_in=new_in,
            reserve_out=new_out,
            fee_in=fee,
            fee_out=0.0,
        )


class LaterSeparateFeeModel(FeeModel):
    """Fee charged on the output after the trade and held outside the pool.

    The gross input is priced against the curve. Of the raw output that
    leaves the reserves, the trader receives (1 - f) and the remaining f
    goes to the output side's bucket. The fee is therefore denominated in
    what the trader receives, not in what they pay.
    """

    policy = FeePolicy.LATER_SEPARATE

    def swap(
        self,
        reserve_in: float,
        reserve_out: float,
        amount_in: float,
        fee_rate: float,
    ) -> SwapResult:
        k = reserve_in * reserve_out
        new_in = reserve_in + amount_in
        # Rounding can put k / new_in above reserve_out when amount_in is
        # below one ulp of reserve_in.
        raw_out = max(reserve_out - k / new_in, 0.0)
        fee = raw_out * fee_rate
        return SwapResult(
            reserve_in=new_in,
            reserve_out=reserve_out - raw_out,
            fee_in=0.0,
            fee_out=fee,
        )


_FEE_MODELS: dict[FeePolicy, FeeModel] = {
    model.policy: model
    for model in (OriginalFeeModel(), SeparateFeeModel(), LaterSeparateFeeModel())
}


def get_fee_model(policy: FeePolicy) -> FeeModel:
    """Return the shared (stateless) model instance for a policy."""
    try:
        return _FEE_MODELS[policy]
    except KeyError:
        raise InvalidPolicyError(f"No fee model registered for {policy!r}") from None
