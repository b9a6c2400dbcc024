"""Head-to-head comparison of fee policies against the original policy."""

from dataclasses import dataclass
import logging
from typing import Iterable, Sequence, Union

from amm_fee_bench.core.pool import DEFAULT_FEE_RATE, Pool
from amm_fee_bench.core.trade import FeePolicy

logger = logging.getLogger(__name__)

BASELINE_POLICY = FeePolicy.ORIGINAL

Drift = tuple[float, float]
PolicyTag = Union[FeePolicy, str, int]


@dataclass
class BenchmarkResult:
    """Outcome counts of a candidate policy against the baseline.

    Ties count as wins: the candidate only has to not underperform.
    """
    policy: FeePolicy
    win_x: int = 0
    win_y: int = 0
    win_xy: int = 0
    fail_xy: int = 0
    n_trials: int = 0

    def record(self, baseline: Drift, candidate: Drift, times: int = 1) -> None:
        """Tally one trial (or ``times`` identical trials)."""
        better_x = candidate[0] >= baseline[0]
        better_y = candidate[1] >= baseline[1]
        self.n_trials += times
        if better_x:
            self.win_x += times
        if better_y:
            self.win_y += times
        if better_x and better_y:
            self.win_xy += times
        if not better_x and not better_y:
            self.fail_xy += times

    def merge(self, other: "BenchmarkResult") -> None:
        if other.policy is not self.policy:
            raise ValueError(
                f"Cannot merge {other.policy.value} results into {self.policy.value}"
            )
        self.win_x += other.win_x
        self.win_y += other.win_y
        self.win_xy += other.win_xy
        self.fail_xy += other.fail_xy
        self.n_trials += other.n_trials

    def as_tuple(self) -> tuple[int, int, int, int]:
        """(win_x, win_y, win_xy, fail_xy)."""
        return self.win_x, self.win_y, self.win_xy, self.fail_xy

    @property
    def win_rate_xy(self) -> float:
        if self.n_trials == 0:
            return 0.0
        return self.win_xy / self.n_trials


def simulate_policies(
    initial_x: float,
    initial_y: float,
    sequence: Sequence[float],
    policies: Iterable[FeePolicy],
    fee_rate: float = DEFAULT_FEE_RATE,
) -> list[Drift]:
    """Drift of a fresh pool per policy after the same trade sequence."""
    return [
        Pool(initial_x, initial_y, policy, fee_rate=fee_rate).simulate(sequence)
        for policy in policies
    ]


def benchmark_policies(
    initial_x: float,
    initial_y: float,
    sequences: Iterable[Sequence[float]],
    candidates: Iterable[PolicyTag],
    fee_rate: float = DEFAULT_FEE_RATE,
) -> list[BenchmarkResult]:
    """Benchmark several candidates against one baseline run per sequence.

    Args:
        initial_x: Starting X reserve for every pool
        initial_y: Starting Y reserve for every pool
        sequences: Independent trade sequences; each is replayed on fresh pools
        candidates: Policies to compare with the original policy
        fee_rate: Fee rate shared by all pools

    Returns:
        One BenchmarkResult per candidate, in the given order
    """
    policies = [FeePolicy.parse(candidate) for candidate in candidates]
    results = [BenchmarkResult(policy=policy) for policy in policies]

    for sequence in sequences:
        baseline, *candidate_drifts = simulate_policies(
            initial_x, initial_y, sequence, [BASELINE_POLICY, *policies], fee_rate
        )
        for result, drift in zip(results, candidate_drifts):
            result.record(baseline, drift)

    if logger.isEnabledFor(logging.DEBUG):
        for result in results:
            logger.debug(
                "benchmark %s: trials=%d win_x=%d win_y=%d win_xy=%d fail_xy=%d",
                result.policy.value, result.n_trials, *result.as_tuple(),
            )
    return results


def benchmark(
    initial_x: float,
    initial_y: float,
    sequences: Iterable[Sequence[float]],
    candidate_policy: PolicyTag,
    fee_rate: float = DEFAULT_FEE_RATE,
) -> BenchmarkResult:
    """Compare one candidate policy with the original policy.

    For every sequence a fresh original pool and a fresh candidate pool are
    simulated with the identical trades and their drifts compared. An
    empty batch yields all-zero counts.
    """
    (result,) = benchmark_policies(
        initial_x, initial_y, sequences, [candidate_policy], fee_rate=fee_rate
    )
    return result
