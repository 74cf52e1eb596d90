"""Trend estimation: windowed exponential moving averages and momentum."""

from __future__ import annotations

from collections.abc import Sequence

from models.sector import Momentum

SHORT_WINDOW = 3
LONG_WINDOW = 7


def compute_ema(prices: Sequence[float], period: int) -> float:
    """Exponential moving average of *prices* with smoothing ``2 / (period + 1)``.

    Seeded with the first element and folded left to right. With fewer than
    *period* prices it degrades to the last price (``0`` when empty).
    """
    if len(prices) < period:
        return float(prices[-1]) if prices else 0.0

    k = 2 / (period + 1)
    ema = float(prices[0])
    for price in prices[1:]:
        ema = price * k + ema * (1 - k)
    return ema


def trend_emas(history: Sequence[float]) -> tuple[float, float]:
    """Return ``(short_ema, long_ema)`` over the tail windows of *history*.

    Each window is seeded independently, so no EMA state carries across turns.
    """
    history = list(history)
    short_ema = compute_ema(history[-SHORT_WINDOW:], SHORT_WINDOW)
    long_ema = compute_ema(history[-LONG_WINDOW:], LONG_WINDOW)
    return short_ema, long_ema


def momentum_label(short_ema: float, long_ema: float) -> Momentum:
    return Momentum.BULLISH if short_ema > long_ema else Momentum.BEARISH
