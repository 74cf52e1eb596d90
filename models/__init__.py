"""Data models for the sector market simulation.

The market engine, run orchestration and strategies all import from models.
"""

from models.config import (
    BrokerConfig,
    ConfigurationError,
    MarketConfig,
    MarketSettings,
    SimulationConfig,
    StrategyConfig,
    VolatilityProfile,
)
from models.event import CrisisEvent, Event, EventKind, EventSelection, MarketEvent
from models.log import SessionLog, SimulationLog, TurnLog
from models.portfolio import PortfolioSnapshot
from models.sector import BASELINE_PRICE, PRICE_FLOOR, Momentum, Sector, SectorSpec
from models.session import SessionState, TurnOutcome
from models.trade import ExecutedTrade, Order, TradeResult

__all__ = [
    # config
    "BrokerConfig",
    "ConfigurationError",
    "MarketConfig",
    "MarketSettings",
    "SimulationConfig",
    "StrategyConfig",
    "VolatilityProfile",
    # event
    "CrisisEvent",
    "Event",
    "EventKind",
    "EventSelection",
    "MarketEvent",
    # log
    "SessionLog",
    "SimulationLog",
    "TurnLog",
    # portfolio
    "PortfolioSnapshot",
    # sector
    "BASELINE_PRICE",
    "PRICE_FLOOR",
    "Momentum",
    "Sector",
    "SectorSpec",
    # session
    "SessionState",
    "TurnOutcome",
    # trade
    "ExecutedTrade",
    "Order",
    "TradeResult",
]
