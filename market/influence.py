"""Influence graph lookup."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from models.sector import BASELINE_PRICE, Sector

INFLUENCE_STEP = 0.02


def influence_score(
    sector_name: str,
    live_sectors: Iterable[Sector],
    graph: Mapping[str, Mapping[str, float]],
) -> float:
    """Sum ``direction * 0.02`` over related sectors trading above the baseline.

    Related sectors missing from *live_sectors*, or at or below the starting
    price, contribute nothing.
    """
    relations = graph.get(sector_name) or {}
    if not relations:
        return 0.0

    prices = {s.name: s.price for s in live_sectors}
    score = 0.0
    for related, direction in relations.items():
        price = prices.get(related)
        if price is not None and price > BASELINE_PRICE:
            score += direction * INFLUENCE_STEP
    return score
