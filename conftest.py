"""Shared pytest fixtures: a scripted random source and a small market."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from models.config import MarketConfig, MarketSettings
from models.event import CrisisEvent, MarketEvent
from models.sector import SectorSpec


class ScriptedRandom:
    """Deterministic stand-in for ``random.Random``.

    ``random()`` and ``uniform()`` pop from their scripted queues (falling
    back to *default_random* / the range midpoint once exhausted).
    ``choice()`` pops an index from *choices* (default 0) and ``sample()``
    returns the first *k* elements in order.
    """

    def __init__(
        self,
        randoms: Sequence[float] = (),
        uniforms: Sequence[float] = (),
        choices: Sequence[int] = (),
        default_random: float = 0.99,
    ) -> None:
        self.randoms = list(randoms)
        self.uniforms = list(uniforms)
        self.choices = list(choices)
        self.default_random = default_random

    def random(self) -> float:
        return self.randoms.pop(0) if self.randoms else self.default_random

    def uniform(self, a: float, b: float) -> float:
        return self.uniforms.pop(0) if self.uniforms else (a + b) / 2

    def choice(self, seq):
        idx = self.choices.pop(0) if self.choices else 0
        return seq[idx]

    def sample(self, population, k):
        return list(population)[:k]


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def market_config() -> MarketConfig:
    return MarketConfig(
        settings=MarketSettings(sample_size=3),
        sectors=[
            SectorSpec(name="Tech", volatility="high"),
            SectorSpec(name="Retail", volatility="low"),
            SectorSpec(name="Finance", volatility="medium"),
            SectorSpec(name="Energy", volatility="medium"),
        ],
        influence_graph={
            "Tech": {"Finance": 1, "Retail": -1},
            "Retail": {"Crypto": 1},
        },
        crisis_events=[
            CrisisEvent(name="Banking Collapse", affects=["Finance", "Tech"], impact=-0.5),
        ],
        market_events=[
            MarketEvent(name="AI Breakthrough", affects=["Tech"], impact=0.15),
            MarketEvent(name="Holiday Boom", affects=["Retail"], impact=0.1),
        ],
    )
