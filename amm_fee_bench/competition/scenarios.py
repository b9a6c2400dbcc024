"""Catalogue of benchmark scenarios."""

from dataclasses import dataclass

from amm_fee_bench.market.sequences import SequenceFamily, SequenceSpec


@dataclass(frozen=True)
class Scenario:
    """A named trade flow to benchmark fee policies on."""
    name: str
    title: str
    sequence: SequenceSpec


DEFAULT_SCENARIOS: tuple[Scenario, ...] = (
    Scenario("full-random-3", "1/3 THRESHOLD FULL RANDOM",
             SequenceSpec(SequenceFamily.FULL_RANDOM, 3)),
    Scenario("full-random-10", "1/10 THRESHOLD FULL RANDOM",
             SequenceSpec(SequenceFamily.FULL_RANDOM, 10)),
    Scenario("full-random-100", "1/100 THRESHOLD FULL RANDOM",
             SequenceSpec(SequenceFamily.FULL_RANDOM, 100)),
    Scenario("round-robin-10", "1/10 THRESHOLD ROUND ROBIN RANDOM",
             SequenceSpec(SequenceFamily.ROUND_ROBIN_RANDOM, 10)),
    Scenario("round-robin-100", "1/100 THRESHOLD ROUND ROBIN RANDOM",
             SequenceSpec(SequenceFamily.ROUND_ROBIN_RANDOM, 100)),
    Scenario("mono-sell-1000", "1/1000 X MONO INCREASE",
             SequenceSpec(SequenceFamily.MONO_SELL, 1000)),
    Scenario("half-split-1000", "1/1000 X Y HALF INCREASE",
             SequenceSpec(SequenceFamily.HALF_SPLIT, 1000)),
    Scenario("alternating-100", "1/100 X Y ALWAYS DRAW",
             SequenceSpec(SequenceFamily.ALTERNATING, 100)),
)


def get_scenario(name: str) -> Scenario:
    """Look up a catalogue scenario by name.

    Raises:
        KeyError: If no scenario has that name
    """
    for scenario in DEFAULT_SCENARIOS:
        if scenario.name == name:
            return scenario
    known = ", ".join(s.name for s in DEFAULT_SCENARIOS)
    raise KeyError(f"Unknown scenario {name!r} (known: {known})")
