"""Abstract base class for trading strategies.

A strategy stands in for the human player: once per turn, before the market
moves, it looks at the session snapshot and its portfolio and returns the
one-share orders it wants filled at the current prices.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from models.config import StrategyConfig
from models.portfolio import PortfolioSnapshot
from models.session import SessionState
from models.trade import Order


class Strategy(ABC):
    """Common interface for pluggable players.

    Orders are executed in the returned sequence; a rejected order does not
    stop later ones.
    """

    def __init__(self, config: StrategyConfig) -> None:
        self.config = config

    @abstractmethod
    def decide(self, state: SessionState, portfolio: PortfolioSnapshot) -> list[Order]:
        """Return this turn's orders. An empty list holds."""
