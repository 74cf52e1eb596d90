"""Event selection: at most one crisis or market-news event per turn."""

from __future__ import annotations

from collections.abc import Sequence

from market.rng import RandomSource
from models.config import ConfigurationError
from models.event import CrisisEvent, EventSelection, MarketEvent

MARKET_EVENT_PROBABILITY = 0.4
# Conditional on no market event; unconditional crisis rate is 0.6 * 0.25 = 0.15.
CRISIS_PROBABILITY = 0.25


def select_event(
    rng: RandomSource,
    crisis_events: Sequence[CrisisEvent],
    market_events: Sequence[MarketEvent],
) -> EventSelection:
    """Draw this turn's event.

    Market news is checked first; a crisis is only considered when no news
    fired. Raises ``ConfigurationError`` if the chosen catalog is empty.
    """
    if rng.random() < MARKET_EVENT_PROBABILITY:
        if not market_events:
            raise ConfigurationError("Market event catalog is empty.")
        return EventSelection.of(rng.choice(market_events))

    if rng.random() < CRISIS_PROBABILITY:
        if not crisis_events:
            raise ConfigurationError("Crisis event catalog is empty.")
        return EventSelection.of(rng.choice(crisis_events))

    return EventSelection.nothing()


def describe_selection(selection: EventSelection) -> str:
    """Human-readable event log line for a turn."""
    event = selection.event
    if selection.kind == "crisis":
        return f"Crisis: {event.name} affects {', '.join(event.affects)} ({event.impact_pct}%)"
    if selection.kind == "market":
        return f"News: {event.name} impacts {', '.join(event.affects)} ({event.impact_pct}%)"
    return "General market fluctuation"
