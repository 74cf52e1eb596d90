"""Buy-nothing baseline: net worth stays at the starting cash."""

from __future__ import annotations

from models.portfolio import PortfolioSnapshot
from models.session import SessionState
from models.trade import Order
from strategies.base import Strategy
from strategies.registry import register


@register("hold")
class HoldStrategy(Strategy):
    def decide(self, state: SessionState, portfolio: PortfolioSnapshot) -> list[Order]:
        return []
