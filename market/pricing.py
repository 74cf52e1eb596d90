"""Price evolution model: one sector, one turn."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from market.influence import influence_score
from market.rng import RandomSource
from market.trend import momentum_label, trend_emas
from models.config import VolatilityProfile
from models.event import EventSelection
from models.sector import PRICE_FLOOR, Sector

UP_PROBABILITY_TRENDING = 0.65
UP_PROBABILITY_FLAT = 0.45


@dataclass(frozen=True)
class SectorUpdate:
    sector: Sector
    delta: float
    influence: float


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def evolve_sector(
    sector: Sector,
    history: Sequence[int],
    live_sectors: Sequence[Sector],
    selection: EventSelection,
    profile: VolatilityProfile,
    graph: Mapping[str, Mapping[str, float]],
    rng: RandomSource,
) -> SectorUpdate:
    """Compute *sector*'s next price from its trailing *history*.

    Draw order per sector is fixed: fluctuation magnitude (``uniform``), then
    direction (``random``). The influence score is computed against
    *live_sectors* and reported on the update, but does not move the price.
    """
    short_ema, long_ema = trend_emas(history or [sector.price])
    up_probability = (
        UP_PROBABILITY_TRENDING if short_ema > long_ema else UP_PROBABILITY_FLAT
    )

    influence = influence_score(sector.name, live_sectors, graph)

    low, high = profile.range_for(sector.volatility)
    fluctuation = rng.uniform(low, high) / 100
    delta = fluctuation if rng.random() < up_probability else -fluctuation
    delta += selection.impact_for(sector.name)

    new_price = max(PRICE_FLOOR, round_half_up(sector.price * (1 + delta)))

    updated = sector.model_copy(
        update={
            "price": new_price,
            "short_ema": round(short_ema, 2),
            "long_ema": round(long_ema, 2),
            "momentum": momentum_label(short_ema, long_ema),
        }
    )
    return SectorUpdate(sector=updated, delta=delta, influence=influence)
