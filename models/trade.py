"""Trade models: Order, ExecutedTrade, TradeResult."""

from typing import Literal

from pydantic import BaseModel


class Order(BaseModel):
    """Single one-share order against a sector's quoted price."""

    sector: str
    side: Literal["buy", "sell"]


class ExecutedTrade(BaseModel):
    """Single executed fill. Produced by the broker from one Order."""

    trade_id: str
    session_id: str
    turn: int
    sector: str
    side: Literal["buy", "sell"]
    quantity: int = 1
    price: float


class TradeResult(BaseModel):
    """Broker response to an order.

    Rejected orders leave the ledger untouched; ``message`` explains why
    (insufficient cash, no shares held, unknown sector).
    """

    status: Literal["accepted", "rejected"]
    trade: ExecutedTrade | None = None  # Set only when status is "accepted"
    message: str = ""
