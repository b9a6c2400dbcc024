"""Scenario runner, catalogue and configuration tests."""

import pytest

from amm_fee_bench.competition.config import (
    DEFAULT_SETTINGS,
    BenchmarkSettings,
    resolve_n_workers,
    resolve_seed,
)
from amm_fee_bench.competition.runner import (
    CANDIDATE_POLICIES,
    SHOWCASE_POLICIES,
    ScenarioRunner,
)
from amm_fee_bench.competition.scenarios import DEFAULT_SCENARIOS, Scenario, get_scenario
from amm_fee_bench.core.trade import FeePolicy
from amm_fee_bench.market.sequences import SequenceFamily, SequenceSpec

SMALL_SETTINGS = DEFAULT_SETTINGS.replace(batch_size=6, sequence_length=200)


def _counts(report):
    return [(r.policy, r.as_tuple(), r.n_trials) for r in report.benchmarks]


class TestScenarioRunner:

    def test_report_shape(self):
        scenario = get_scenario("full-random-10")
        report = ScenarioRunner(settings=SMALL_SETTINGS, seed=1).run(scenario)

        assert report.scenario is scenario
        assert [s.policy for s in report.showcase] == list(SHOWCASE_POLICIES)
        assert [r.policy for r in report.benchmarks] == list(CANDIDATE_POLICIES)
        for result in report.benchmarks:
            assert result.n_trials == 6
            assert result.win_xy <= min(result.win_x, result.win_y)
            assert result.win_xy + result.fail_xy <= 6

    def test_showcase_totals_match_drift(self):
        report = ScenarioRunner(settings=SMALL_SETTINGS, seed=3).run(
            get_scenario("round-robin-10")
        )
        for summary in report.showcase:
            assert summary.total_x == pytest.approx(10000 * (1 + summary.drift_x))
            assert summary.total_y == pytest.approx(100000 * (1 + summary.drift_y))

    def test_same_seed_is_reproducible(self):
        scenario = get_scenario("round-robin-100")
        a = ScenarioRunner(settings=SMALL_SETTINGS, seed=11).run(scenario)
        b = ScenarioRunner(settings=SMALL_SETTINGS, seed=11).run(scenario)
        assert _counts(a) == _counts(b)
        assert a.showcase == b.showcase

    def test_different_seeds_change_showcase(self):
        scenario = get_scenario("full-random-10")
        a = ScenarioRunner(settings=SMALL_SETTINGS, seed=1).run(scenario)
        b = ScenarioRunner(settings=SMALL_SETTINGS, seed=2).run(scenario)
        assert a.showcase != b.showcase

    @pytest.mark.slow
    def test_parallel_matches_sequential(self):
        scenario = get_scenario("full-random-100")
        settings = DEFAULT_SETTINGS.replace(batch_size=8, sequence_length=100)
        sequential = ScenarioRunner(settings=settings, seed=5, n_workers=1).run(scenario)
        parallel = ScenarioRunner(settings=settings, seed=5, n_workers=3).run(scenario)
        assert _counts(parallel) == _counts(sequential)

    def test_deterministic_family_records_whole_batch(self):
        report = ScenarioRunner(settings=SMALL_SETTINGS, seed=0).run(
            get_scenario("mono-sell-1000")
        )
        for result in report.benchmarks:
            assert result.n_trials == 6
            for count in result.as_tuple():
                assert count in (0, 6)

    def test_empty_batch(self):
        settings = SMALL_SETTINGS.replace(batch_size=0)
        report = ScenarioRunner(settings=settings, seed=0).run(get_scenario("full-random-3"))
        for result in report.benchmarks:
            assert result.as_tuple() == (0, 0, 0, 0)
            assert result.n_trials == 0

    def test_zero_length_sequences_tie(self):
        settings = SMALL_SETTINGS.replace(sequence_length=0)
        report = ScenarioRunner(settings=settings, seed=0).run(get_scenario("full-random-10"))
        for summary in report.showcase:
            assert (summary.drift_x, summary.drift_y) == (0.0, 0.0)
        for result in report.benchmarks:
            assert result.as_tuple() == (6, 6, 6, 0)

    def test_custom_candidates(self):
        runner = ScenarioRunner(settings=SMALL_SETTINGS, seed=0, candidates=["separate"])
        report = runner.run(get_scenario("alternating-100"))
        assert [r.policy for r in report.benchmarks] == [FeePolicy.SEPARATE]

    def test_custom_scenario(self):
        scenario = Scenario(
            "tiny", "TINY", SequenceSpec(SequenceFamily.HALF_SPLIT, divisor=500, length=4)
        )
        report = ScenarioRunner(settings=SMALL_SETTINGS, seed=0).run(scenario)
        assert report.benchmarks[0].n_trials == 6

    def test_run_all(self):
        scenarios = [get_scenario("mono-sell-1000"), get_scenario("half-split-1000")]
        reports = ScenarioRunner(settings=SMALL_SETTINGS, seed=0).run_all(scenarios)
        assert [r.scenario.name for r in reports] == ["mono-sell-1000", "half-split-1000"]

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            ScenarioRunner(n_workers=0)


class TestScenarioCatalogue:

    def test_names_are_unique(self):
        names = [s.name for s in DEFAULT_SCENARIOS]
        assert len(names) == len(set(names)) == 8

    def test_lookup(self):
        scenario = get_scenario("half-split-1000")
        assert scenario.sequence.family is SequenceFamily.HALF_SPLIT
        assert scenario.sequence.divisor == 1000

    def test_unknown_scenario(self):
        with pytest.raises(KeyError):
            get_scenario("does-not-exist")


class TestSettings:

    def test_defaults(self):
        assert DEFAULT_SETTINGS.initial_x == 10000.0
        assert DEFAULT_SETTINGS.initial_y == 100000.0
        assert DEFAULT_SETTINGS.fee_rate == 0.003
        assert DEFAULT_SETTINGS.batch_size == 1000
        assert DEFAULT_SETTINGS.sequence_length == 10000

    def test_replace_ignores_none(self):
        settings = DEFAULT_SETTINGS.replace(batch_size=None, fee_rate=0.01)
        assert settings.batch_size == 1000
        assert settings.fee_rate == 0.01

    @pytest.mark.parametrize(
        "overrides",
        [
            {"initial_x": 0.0},
            {"initial_y": -5.0},
            {"fee_rate": 1.0},
            {"batch_size": -1},
            {"sequence_length": -1},
        ],
    )
    def test_invalid_settings(self, overrides):
        with pytest.raises(ValueError):
            DEFAULT_SETTINGS.replace(**overrides)

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_SETTINGS.batch_size = 3

    def test_direct_construction(self):
        settings = BenchmarkSettings(
            initial_x=1.0, initial_y=2.0, fee_rate=0.0, batch_size=1, sequence_length=1
        )
        assert settings.initial_y == 2.0

    def test_resolve_n_workers(self, monkeypatch):
        monkeypatch.delenv("N_WORKERS", raising=False)
        assert resolve_n_workers() == 1
        monkeypatch.setenv("N_WORKERS", "4")
        assert resolve_n_workers() == 4
        monkeypatch.setenv("N_WORKERS", "0")
        with pytest.raises(ValueError):
            resolve_n_workers()

    def test_resolve_seed(self, monkeypatch):
        monkeypatch.delenv("AMM_FEE_BENCH_SEED", raising=False)
        assert resolve_seed() is None
        monkeypatch.setenv("AMM_FEE_BENCH_SEED", "99")
        assert resolve_seed() == 99
