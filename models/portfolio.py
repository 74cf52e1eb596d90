"""Portfolio state models."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from models.sector import Sector


class PortfolioSnapshot(BaseModel):
    """Cash and holdings (sector name -> shares) at a point in a session.

    Produced by the broker; valuation helpers read prices from the live
    sector roster and value shares of sectors missing from it at zero.
    """

    cash: float
    holdings: dict[str, int] = Field(default_factory=dict)

    def holdings_value(self, sectors: Iterable[Sector]) -> float:
        prices = {s.name: s.price for s in sectors}
        return float(
            sum(prices.get(name, 0) * qty for name, qty in self.holdings.items())
        )

    def net_worth(self, sectors: Iterable[Sector]) -> float:
        return self.cash + self.holdings_value(sectors)
