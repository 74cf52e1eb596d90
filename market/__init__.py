"""Market simulation engine: trend, influence, events, price evolution and the turn step."""

from market.engine import MarketEngine, advance_turn, init_session
from market.events import select_event
from market.influence import influence_score
from market.pricing import SectorUpdate, evolve_sector
from market.rng import RandomSource, make_rng
from market.trend import compute_ema, momentum_label

__all__ = [
    "MarketEngine",
    "RandomSource",
    "SectorUpdate",
    "advance_turn",
    "compute_ema",
    "evolve_sector",
    "influence_score",
    "init_session",
    "make_rng",
    "momentum_label",
    "select_event",
]
