"""Tests for the influence graph lookup."""

import pytest

from market.influence import influence_score
from models.sector import Sector

GRAPH = {
    "Tech": {"Finance": 1, "Retail": -1, "Crypto": 1},
    "Retail": {"Tech": 0.5},
}


def _sectors(**prices):
    return [Sector(name=name, volatility="medium", price=price) for name, price in prices.items()]


def test_no_related_sector_above_baseline_scores_zero():
    live = _sectors(Tech=100, Finance=100, Retail=80)
    assert influence_score("Tech", live, GRAPH) == 0


def test_sector_without_relations_scores_zero():
    assert influence_score("Energy", _sectors(Energy=150, Tech=150), GRAPH) == 0


def test_signed_directions_accumulate():
    live = _sectors(Tech=100, Finance=130, Retail=101)
    assert influence_score("Tech", live, GRAPH) == pytest.approx(0.02 - 0.02)


def test_positive_influence_from_single_elevated_sector():
    live = _sectors(Tech=90, Finance=120, Retail=50)
    assert influence_score("Tech", live, GRAPH) == pytest.approx(0.02)


def test_related_sector_missing_from_session_is_skipped():
    # Crypto is in the graph but not in the live roster.
    live = _sectors(Tech=100, Retail=150)
    assert influence_score("Tech", live, GRAPH) == pytest.approx(-0.02)


def test_direction_magnitude_scales_contribution():
    live = _sectors(Retail=100, Tech=200)
    assert influence_score("Retail", live, GRAPH) == pytest.approx(0.01)
