"""Tests for per-turn event selection and event log lines."""

import random

import pytest

from market.events import describe_selection, select_event
from models.config import ConfigurationError
from models.event import CrisisEvent, EventSelection, MarketEvent

CRISES = [
    CrisisEvent(name="Banking Collapse", affects=["Finance", "Real Estate"], impact=-0.5),
    CrisisEvent(name="Oil Embargo", affects=["Energy"], impact=-0.3),
]
NEWS = [
    MarketEvent(name="AI Breakthrough", affects=["Tech", "Telecom"], impact=0.15),
    MarketEvent(name="Rate Cut", affects=["Finance"], impact=0.08),
]


class TestSelectEvent:
    def test_market_event_checked_first(self, scripted_random):
        rng = scripted_random(randoms=[0.39], choices=[1])
        selection = select_event(rng, CRISES, NEWS)
        assert selection.kind == "market"
        assert selection.event == NEWS[1]
        # Crisis draw never happens once news fires.
        assert rng.randoms == []

    def test_crisis_only_when_no_market_event(self, scripted_random):
        rng = scripted_random(randoms=[0.4, 0.24], choices=[0])
        selection = select_event(rng, CRISES, NEWS)
        assert selection.kind == "crisis"
        assert selection.event == CRISES[0]

    def test_no_event(self, scripted_random):
        rng = scripted_random(randoms=[0.5, 0.25])
        selection = select_event(rng, CRISES, NEWS)
        assert selection.kind == "none"
        assert selection.event is None

    def test_empty_market_catalog_is_configuration_error(self, scripted_random):
        with pytest.raises(ConfigurationError):
            select_event(scripted_random(randoms=[0.0]), CRISES, [])

    def test_empty_crisis_catalog_is_configuration_error(self, scripted_random):
        with pytest.raises(ConfigurationError):
            select_event(scripted_random(randoms=[0.9, 0.0]), [], NEWS)

    def test_empty_catalog_not_touched_when_not_chosen(self, scripted_random):
        selection = select_event(scripted_random(randoms=[0.9, 0.9]), [], [])
        assert selection.kind == "none"

    def test_frequencies_match_configured_probabilities(self):
        rng = random.Random(1234)
        n = 20_000
        kinds = [select_event(rng, CRISES, NEWS).kind for _ in range(n)]
        assert kinds.count("market") / n == pytest.approx(0.40, abs=0.02)
        assert kinds.count("crisis") / n == pytest.approx(0.15, abs=0.02)
        assert kinds.count("none") / n == pytest.approx(0.45, abs=0.02)


class TestEventSelection:
    def test_impact_applies_only_to_listed_sectors(self):
        selection = EventSelection.of(CRISES[0])
        assert selection.impact_for("Finance") == -0.5
        assert selection.impact_for("Real Estate") == -0.5
        assert selection.impact_for("Tech") == 0.0

    def test_no_event_has_no_impact(self):
        assert EventSelection.nothing().impact_for("Finance") == 0.0

    def test_kind_must_match_event(self):
        with pytest.raises(ValueError):
            EventSelection(kind="market", event=CRISES[0])
        with pytest.raises(ValueError):
            EventSelection(kind="crisis")


class TestDescribeSelection:
    def test_crisis_line(self):
        line = describe_selection(EventSelection.of(CRISES[0]))
        assert line == "Crisis: Banking Collapse affects Finance, Real Estate (-50%)"

    def test_market_line(self):
        line = describe_selection(EventSelection.of(NEWS[0]))
        assert line == "News: AI Breakthrough impacts Tech, Telecom (15%)"

    def test_general_fluctuation_line(self):
        assert describe_selection(EventSelection.nothing()) == "General market fluctuation"

    def test_half_percent_crisis_rounds_away_from_zero(self):
        crisis = CrisisEvent(name="Flash Crash", affects=["Tech"], impact=-0.125)
        line = describe_selection(EventSelection.of(crisis))
        assert line == "Crisis: Flash Crash affects Tech (-13%)"

    def test_half_percent_news_rounds_up(self):
        news = MarketEvent(name="Minor Upgrade", affects=["Retail"], impact=0.025)
        line = describe_selection(EventSelection.of(news))
        assert line == "News: Minor Upgrade impacts Retail (3%)"

    @pytest.mark.parametrize(
        "impact, expected", [(0.0, "0"), (-0.004, "0"), (0.08, "8"), (-0.35, "-35"), (1.0, "100")]
    )
    def test_impact_pct(self, impact, expected):
        assert MarketEvent(name="X", affects=[], impact=impact).impact_pct == expected
