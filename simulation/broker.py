"""In-process broker: the player's portfolio ledger.

Trades fill instantly, one share at a time, at the sector's current quoted
price. There is no order book and no liquidity limit. Orders that cannot be
filled are rejected without touching the ledger.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence

from models.config import BrokerConfig
from models.portfolio import PortfolioSnapshot
from models.sector import Sector
from models.trade import ExecutedTrade, Order, TradeResult

logger = logging.getLogger(__name__)


class Broker:
    """Stateful ledger holding cash and share counts for one session.

    Instantiate one ``Broker`` per session. The broker owns cash and
    holdings only; prices are read from the sector roster passed in with
    each call and are never modified here.
    """

    def __init__(self, config: BrokerConfig, session_id: str = "") -> None:
        self._config = config
        self._session_id = session_id
        self._cash: float = config.initial_cash
        self._holdings: dict[str, int] = {}
        self._trade_history: list[ExecutedTrade] = []

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def get_portfolio(self) -> PortfolioSnapshot:
        """Return a snapshot of the current portfolio state."""
        return PortfolioSnapshot(cash=self._cash, holdings=dict(self._holdings))

    def get_trade_history(self) -> list[ExecutedTrade]:
        """Return the full list of executed trades so far."""
        return list(self._trade_history)

    def holdings_value(self, sectors: Iterable[Sector]) -> float:
        return self.get_portfolio().holdings_value(sectors)

    def net_worth(self, sectors: Iterable[Sector]) -> float:
        """Cash plus holdings valued at the roster's current prices."""
        return self.get_portfolio().net_worth(sectors)

    def buy(self, sector_name: str, sectors: Sequence[Sector], turn: int = 0) -> TradeResult:
        """Buy one share of *sector_name* at its current price."""
        return self.execute(Order(sector=sector_name, side="buy"), sectors, turn)

    def sell(self, sector_name: str, sectors: Sequence[Sector], turn: int = 0) -> TradeResult:
        """Sell one share of *sector_name* at its current price."""
        return self.execute(Order(sector=sector_name, side="sell"), sectors, turn)

    def execute(self, order: Order, sectors: Sequence[Sector], turn: int = 0) -> TradeResult:
        """Validate and fill *order* against the live *sectors*.

        Returns a rejected ``TradeResult`` (ledger unchanged) when the sector
        is not live, cash does not cover the price, or no shares are held.
        """
        sector = next((s for s in sectors if s.name == order.sector), None)
        if sector is None:
            return self._reject(order, f"Sector '{order.sector}' is not trading in this session.")

        price = sector.price
        if order.side == "buy":
            if self._cash < price:
                return self._reject(
                    order,
                    f"Insufficient cash to buy {order.sector} at ${price} "
                    f"(available ${self._cash:.2f}).",
                )
            self._cash -= price
            self._holdings[order.sector] = self._holdings.get(order.sector, 0) + 1
        else:  # sell
            held = self._holdings.get(order.sector, 0)
            if held <= 0:
                return self._reject(order, f"Cannot sell {order.sector}: no shares held.")
            self._cash += price
            if held == 1:
                del self._holdings[order.sector]
            else:
                self._holdings[order.sector] = held - 1

        trade = ExecutedTrade(
            trade_id=uuid.uuid4().hex[:12],
            session_id=self._session_id,
            turn=turn,
            sector=order.sector,
            side=order.side,
            price=price,
        )
        self._trade_history.append(trade)
        logger.debug("Filled %s %s at %d (cash now %.2f).", order.side, order.sector, price, self._cash)
        return TradeResult(
            status="accepted",
            trade=trade,
            message=f"{order.side.capitalize()} 1 {order.sector} at ${price}.",
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _reject(order: Order, message: str) -> TradeResult:
        logger.debug("Rejected %s %s: %s", order.side, order.sector, message)
        return TradeResult(status="rejected", message=message)
