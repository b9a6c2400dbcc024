"""Scenario runner: one showcase run plus a batch benchmark per scenario."""

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
import logging
from typing import Iterable, Optional

import numpy as np

from amm_fee_bench.competition.benchmark import (
    BASELINE_POLICY,
    BenchmarkResult,
    benchmark_policies,
    simulate_policies,
)
from amm_fee_bench.competition.config import DEFAULT_SETTINGS, BenchmarkSettings
from amm_fee_bench.competition.scenarios import Scenario
from amm_fee_bench.core.pool import Pool
from amm_fee_bench.core.trade import FeePolicy
from amm_fee_bench.market.sequences import SequenceSpec

logger = logging.getLogger(__name__)

SHOWCASE_POLICIES = (BASELINE_POLICY, FeePolicy.LATER_SEPARATE)
CANDIDATE_POLICIES = (FeePolicy.LATER_SEPARATE, FeePolicy.SEPARATE)


@dataclass
class PoolSummary:
    """Final holdings of one pool after a showcase run."""
    policy: FeePolicy
    total_x: float
    total_y: float
    drift_x: float
    drift_y: float


@dataclass
class ScenarioReport:
    """Everything a scenario run produced."""
    scenario: Scenario
    settings: BenchmarkSettings
    showcase: list[PoolSummary] = field(default_factory=list)
    benchmarks: list[BenchmarkResult] = field(default_factory=list)


@dataclass(frozen=True)
class _TrialBatch:
    """A picklable slice of benchmark trials, one child seed per trial."""
    sequence: SequenceSpec
    settings: BenchmarkSettings
    candidates: tuple[FeePolicy, ...]
    seeds: tuple[np.random.SeedSequence, ...]


def _run_trial_batch(batch: _TrialBatch) -> list[BenchmarkResult]:
    settings = batch.settings
    sequences = (
        batch.sequence.generate(
            settings.initial_x, settings.initial_y, np.random.default_rng(seed)
        )
        for seed in batch.seeds
    )
    return benchmark_policies(
        settings.initial_x,
        settings.initial_y,
        sequences,
        batch.candidates,
        fee_rate=settings.fee_rate,
    )


class ScenarioRunner:
    """Runs scenarios against fresh pools.

    Each random trial draws its sequence from its own child of the base
    seed, so results do not depend on ``n_workers``.
    """

    def __init__(
        self,
        *,
        settings: BenchmarkSettings = DEFAULT_SETTINGS,
        n_workers: int = 1,
        seed: Optional[int] = None,
        candidates: Iterable[FeePolicy] = CANDIDATE_POLICIES,
    ):
        if n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {n_workers}")
        self.settings = settings
        self.n_workers = n_workers
        self.seed = seed
        self.candidates = tuple(FeePolicy.parse(c) for c in candidates)

    def run(self, scenario: Scenario) -> ScenarioReport:
        """Run the showcase and the benchmark batch for one scenario."""
        spec = scenario.sequence.with_length(self.settings.sequence_length)
        showcase_seed, batch_seed = np.random.SeedSequence(self.seed).spawn(2)
        logger.info("Running scenario %s (%s)", scenario.name, spec.describe())

        report = ScenarioReport(scenario=scenario, settings=self.settings)
        report.showcase = self._showcase(spec, showcase_seed)
        report.benchmarks = self._benchmark(spec, batch_seed)

        logger.info(
            "Finished scenario %s: %s",
            scenario.name,
            ", ".join(f"{r.policy.value} win_xy={r.win_xy}" for r in report.benchmarks),
        )
        return report

    def run_all(self, scenarios: Iterable[Scenario]) -> list[ScenarioReport]:
        return [self.run(scenario) for scenario in scenarios]

    def _showcase(
        self, spec: SequenceSpec, seed: np.random.SeedSequence
    ) -> list[PoolSummary]:
        s = self.settings
        sequence = spec.generate(s.initial_x, s.initial_y, np.random.default_rng(seed))
        summaries = []
        for policy in SHOWCASE_POLICIES:
            pool = Pool(s.initial_x, s.initial_y, policy, fee_rate=s.fee_rate)
            drift_x, drift_y = pool.simulate(sequence)
            summaries.append(PoolSummary(
                policy=policy,
                total_x=pool.total_x,
                total_y=pool.total_y,
                drift_x=drift_x,
                drift_y=drift_y,
            ))
        return summaries

    def _benchmark(
        self, spec: SequenceSpec, seed: np.random.SeedSequence
    ) -> list[BenchmarkResult]:
        s = self.settings
        if s.batch_size == 0:
            return [BenchmarkResult(policy=policy) for policy in self.candidates]

        if not spec.family.is_random:
            # Every trial would replay the same trades; simulate once.
            sequence = spec.generate(s.initial_x, s.initial_y)
            baseline, *drifts = simulate_policies(
                s.initial_x, s.initial_y, sequence,
                [BASELINE_POLICY, *self.candidates], s.fee_rate,
            )
            results = [BenchmarkResult(policy=policy) for policy in self.candidates]
            for result, drift in zip(results, drifts):
                result.record(baseline, drift, times=s.batch_size)
            return results

        trial_seeds = seed.spawn(s.batch_size)
        n_chunks = min(self.n_workers, s.batch_size)
        batches = [
            _TrialBatch(
                sequence=spec,
                settings=s,
                candidates=self.candidates,
                seeds=tuple(trial_seeds[i::n_chunks]),
            )
            for i in range(n_chunks)
        ]

        if n_chunks == 1:
            return _run_trial_batch(batches[0])

        logger.debug("Dispatching %d trials to %d workers", s.batch_size, n_chunks)
        results = [BenchmarkResult(policy=policy) for policy in self.candidates]
        with ProcessPoolExecutor(max_workers=n_chunks) as executor:
            for partial in executor.map(_run_trial_batch, batches):
                for result, part in zip(results, partial):
                    result.merge(part)
        return results
