"""Momentum follower: ride Bullish sectors, dump Bearish ones."""

from __future__ import annotations

import logging

from models.portfolio import PortfolioSnapshot
from models.sector import Momentum
from models.session import SessionState
from models.trade import Order
from strategies.base import Strategy
from strategies.registry import register

logger = logging.getLogger(__name__)


@register("momentum")
class MomentumStrategy(Strategy):
    """Sell one share of each held Bearish sector, then buy one of each Bullish sector.

    Sells are listed first so their proceeds fund the buys. Buys go cheapest
    first and stop once the projected cash no longer covers the next price.
    Sectors without a momentum label yet (turn 0) are left alone.
    """

    def decide(self, state: SessionState, portfolio: PortfolioSnapshot) -> list[Order]:
        orders: list[Order] = []
        cash = portfolio.cash

        for sector in state.sectors:
            if sector.momentum is Momentum.BEARISH and portfolio.holdings.get(sector.name, 0) > 0:
                orders.append(Order(sector=sector.name, side="sell"))
                cash += sector.price

        bullish = sorted(
            (s for s in state.sectors if s.momentum is Momentum.BULLISH),
            key=lambda s: (s.price, s.name),
        )
        for sector in bullish:
            if sector.price > cash:
                break
            orders.append(Order(sector=sector.name, side="buy"))
            cash -= sector.price

        logger.debug(
            "Turn %d: momentum strategy placing %d order(s).", state.turn, len(orders)
        )
        return orders
