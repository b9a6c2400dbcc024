"""Fee model interface implemented by each fee policy."""

from abc import ABC, abstractmethod

from amm_fee_bench.core.trade import FeePolicy, SwapResult


class FeeModel(ABC):
    """Abstract base class for pool fee accounting.

    A fee model is a pure state transition: given the reserves on the
    input and output side of a trade and the gross amount paid in, it
    returns the post-trade reserves and the fees credited outside the
    pool. It never mutates anything, so every model can be exercised
    in isolation from the pool.

    Models only see one side orientation. The pool is responsible for
    mapping positive trades to (X in, Y out) and negative trades to
    (Y in, X out).
    """

    policy: FeePolicy

    @abstractmethod
    def swap(
        self,
        reserve_in: float,
        reserve_out: float,
        amount_in: float,
        fee_rate: float,
    ) -> SwapResult:
        """Apply a trade paying ``amount_in`` into the pool.

        Args:
            reserve_in: Reserve of the asset the trader pays
            reserve_out: Reserve of the asset the trader receives
            amount_in: Gross amount paid in (non-negative)
            fee_rate: Proportional fee, e.g. 0.003 for 30bps

        Returns:
            SwapResult with post-trade reserves and fees collected
        """
        pass
