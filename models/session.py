"""Session snapshot and per-turn outcome models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models.event import EventSelection
from models.sector import Sector


class SessionState(BaseModel):
    """Everything the engine owns between turns.

    The engine never mutates a ``SessionState``; ``advance_turn`` returns a
    new one. ``history`` maps each sector name to its trailing prices,
    oldest first, with the current price last.
    """

    model_config = ConfigDict(frozen=True)

    turn: int = 0
    sectors: list[Sector] = Field(default_factory=list)
    history: dict[str, list[int]] = Field(default_factory=dict)
    event_log: list[str] = Field(default_factory=list)  # Newest first

    def get_sector(self, name: str) -> Sector | None:
        return next((s for s in self.sectors if s.name == name), None)

    @property
    def prices(self) -> dict[str, int]:
        return {s.name: s.price for s in self.sectors}


class TurnOutcome(BaseModel):
    """Result of one ``advance_turn`` call."""

    state: SessionState
    selection: EventSelection
    log_entry: str
    influence: dict[str, float] = Field(default_factory=dict)
