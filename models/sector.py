"""Sector models: catalog entries and live per-session sector records."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

VolatilityClass = Literal["low", "medium", "high"]

# Every sector enters a session at this price; influence is measured against it.
BASELINE_PRICE = 100
PRICE_FLOOR = 5


class Momentum(str, Enum):
    """Direction label derived from comparing the short and long EMA."""

    BULLISH = "Bullish"
    BEARISH = "Bearish"


class SectorSpec(BaseModel):
    """Catalog entry a session samples its sectors from."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    volatility: VolatilityClass


class Sector(BaseModel):
    """A live sector within a session.

    Instances are frozen; the engine produces a fresh ``Sector`` each turn via
    ``model_copy``. EMA and momentum fields stay ``None`` until the first turn
    has been simulated.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    volatility: VolatilityClass
    price: int = Field(default=BASELINE_PRICE, ge=PRICE_FLOOR)
    short_ema: float | None = None
    long_ema: float | None = None
    momentum: Momentum | None = None

    @classmethod
    def from_spec(cls, spec: SectorSpec, price: int = BASELINE_PRICE) -> Sector:
        return cls(name=spec.name, volatility=spec.volatility, price=price)
