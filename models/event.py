"""Scripted market events and the per-turn event selection."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

EventKind = Literal["none", "crisis", "market"]


class _BaseEvent(BaseModel):
    """Catalog event: a signed impact fraction added to each affected sector's delta."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    affects: list[str]
    impact: float

    def affects_sector(self, sector_name: str) -> bool:
        return sector_name in self.affects

    @property
    def impact_pct(self) -> str:
        """Impact as a whole-number percentage string, e.g. ``-50``.

        Ties round away from zero, so ``-0.125`` reads ``-13``.
        """
        pct = Decimal(str(self.impact * 100)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return f"{pct:f}" if pct != 0 else "0"


class CrisisEvent(_BaseEvent):
    """Systemic shock (rare, usually large and negative)."""

    kind: Literal["crisis"] = "crisis"


class MarketEvent(_BaseEvent):
    """Sector-specific market news."""

    kind: Literal["market"] = "market"


Event = Union[CrisisEvent, MarketEvent]


class EventSelection(BaseModel):
    """Outcome of the once-per-turn event draw.

    At most one event is active for a turn; ``kind`` is ``"none"`` exactly
    when ``event`` is ``None``.
    """

    model_config = ConfigDict(frozen=True)

    kind: EventKind = "none"
    event: Event | None = None

    @model_validator(mode="after")
    def _check_kind_matches_event(self) -> EventSelection:
        if self.event is None:
            if self.kind != "none":
                raise ValueError(f"Selection of kind '{self.kind}' requires an event.")
        elif self.event.kind != self.kind:
            raise ValueError(
                f"Selection kind '{self.kind}' does not match event kind '{self.event.kind}'."
            )
        return self

    @classmethod
    def nothing(cls) -> EventSelection:
        return cls()

    @classmethod
    def of(cls, event: Event) -> EventSelection:
        return cls(kind=event.kind, event=event)

    def applies_to(self, sector_name: str) -> bool:
        """Return ``True`` when the active event lists *sector_name*."""
        return self.event is not None and self.event.affects_sector(sector_name)

    def impact_for(self, sector_name: str) -> float:
        """Additive delta contributed by the active event to *sector_name*."""
        if self.applies_to(sector_name):
            return self.event.impact
        return 0.0
