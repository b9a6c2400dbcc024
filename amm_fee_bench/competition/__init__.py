"""Benchmark aggregation and scenario orchestration."""

from amm_fee_bench.competition.benchmark import (
    BASELINE_POLICY,
    BenchmarkResult,
    benchmark,
    benchmark_policies,
    simulate_policies,
)
from amm_fee_bench.competition.config import DEFAULT_SETTINGS, BenchmarkSettings
from amm_fee_bench.competition.runner import PoolSummary, ScenarioReport, ScenarioRunner
from amm_fee_bench.competition.scenarios import DEFAULT_SCENARIOS, Scenario, get_scenario

__all__ = [
    "BASELINE_POLICY",
    "BenchmarkResult",
    "benchmark",
    "benchmark_policies",
    "simulate_policies",
    "DEFAULT_SETTINGS",
    "BenchmarkSettings",
    "PoolSummary",
    "ScenarioReport",
    "ScenarioRunner",
    "DEFAULT_SCENARIOS",
    "Scenario",
    "get_scenario",
]
