from __future__ import annotations

import pytest

from pagerank_advisor.recommendations.config import EngineConfig
from pagerank_advisor.recommendations.models import SizeBand
from pagerank_advisor.recommendations.rules import (
    RULES,
    GraphProfile,
    classify_band,
    select_rule,
)

BAND_ORDER = list(SizeBand)


def _profile(band: SizeBand, density: float = 0.0, tolerance: float | None = None,
             memory_usage_gb: float = 0.0, memory_limit_gb: float = 20.0) -> GraphProfile:
    return GraphProfile(
        node_count=1,
        edge_count=0,
        directed=True,
        tolerance=tolerance,
        density=density,
        memory_usage_gb=memory_usage_gb,
        memory_limit_gb=memory_limit_gb,
        band=band,
    )


@pytest.mark.parametrize(
    ("nodes", "band"),
    [
        (0, SizeBand.small),
        (99_999, SizeBand.small),
        (100_000, SizeBand.medium),
        (999_999, SizeBand.medium),
        (1_000_000, SizeBand.large),
        (10_000_000, SizeBand.very_large),
        (49_999_999, SizeBand.very_large),
        (50_000_000, SizeBand.extreme),
        (10**12, SizeBand.extreme),
    ],
)
def test_classify_band_boundaries(nodes, band):
    assert classify_band(nodes) == band


def test_band_is_monotone_in_node_count():
    counts = [0, 10, 50_000, 100_000, 750_000, 1_000_000, 5_000_000, 10_000_000,
              20_000_000, 50_000_000, 10**9]
    ranks = [BAND_ORDER.index(classify_band(n)) for n in counts]
    assert ranks == sorted(ranks)


def test_classify_band_honours_custom_breakpoints():
    config = EngineConfig(band_breakpoints=(10, 100, 1000, 10000))
    assert classify_band(50, config) == SizeBand.medium
    assert classify_band(10000, config) == SizeBand.extreme


@pytest.mark.parametrize("band", list(SizeBand))
def test_every_band_has_a_fallback_rule(band):
    rule = select_rule(_profile(band))
    assert rule.band == band


def test_first_matching_rule_wins():
    # High precision is checked before density in the medium band
    rule = select_rule(_profile(SizeBand.medium, density=100.0, tolerance=1e-9))
    assert rule.name == "medium_high_precision"


def test_medium_density_breakpoints():
    assert select_rule(_profile(SizeBand.medium, density=30.5)).name == "medium_high_density"
    assert select_rule(_profile(SizeBand.medium, density=30.0)).name == "medium_medium_density"
    assert select_rule(_profile(SizeBand.medium, density=15.0)).name == "medium_low_density"


def test_density_breakpoints_come_from_config():
    config = EngineConfig(high_density=50.0, medium_density=20.0)
    assert select_rule(_profile(SizeBand.medium, density=40.0), config).name == "medium_medium_density"


def test_memory_branch_only_in_extreme_band():
    over = dict(memory_usage_gb=100.0, memory_limit_gb=20.0)
    assert select_rule(_profile(SizeBand.extreme, **over)).name == "extreme_memory_constrained"
    assert select_rule(_profile(SizeBand.large, **over)).name == "large"
    assert select_rule(_profile(SizeBand.very_large, **over)).name == "very_large"


def test_rule_names_are_unique():
    names = [rule.name for rule in RULES]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("rule", RULES, ids=lambda r: r.name)
def test_outcomes_list_one_to_three_alternatives(rule):
    assert 1 <= len(rule.outcome.alternatives) <= 3


def test_select_rule_raises_when_table_has_no_match():
    small_only = [rule for rule in RULES if rule.band == SizeBand.small]
    with pytest.raises(LookupError):
        select_rule(_profile(SizeBand.extreme), rules=small_only)
