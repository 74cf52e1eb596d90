"""Logging and experiment storage models.

- ``TurnLog``: per-turn audit of the market step and the trading around it.
- ``SessionLog``: full session audit trail.
- ``SimulationLog``: run-level log with embedded config for reproducibility.
"""

from __future__ import annotations

from pydantic import BaseModel

from models.config import SimulationConfig
from models.event import EventKind
from models.portfolio import PortfolioSnapshot
from models.sector import Sector
from models.trade import ExecutedTrade, TradeResult


class TurnLog(BaseModel):
    """Per-turn audit.

    ``portfolio`` is the ledger after the strategy traded at the pre-turn
    prices; ``net_worth`` values it at the post-turn prices.
    """

    turn: int
    log_entry: str
    event_kind: EventKind
    event_name: str | None = None
    trade_results: list[TradeResult] = []
    sectors: list[Sector] = []
    influence: dict[str, float] = {}
    portfolio: PortfolioSnapshot
    net_worth: float


class SessionLog(BaseModel):
    """Full session audit trail.

    Session-level identifiers live here; run-level parameters are stored
    once on ``SimulationLog.config``.
    """

    session_id: str
    strategy: str
    seed: int | None = None
    turn_logs: list[TurnLog] = []
    trades: list[ExecutedTrade] = []
    event_log: list[str] = []
    final_portfolio: PortfolioSnapshot | None = None
    final_net_worth: float | None = None


class SimulationLog(BaseModel):
    """Run-level log with embedded configuration for reproducibility.

    ``run_name`` is derived from the configuration file path by the runner.
    """

    run_name: str
    config: SimulationConfig
    session_logs: list[SessionLog] = []
    errors: list[str] = []
