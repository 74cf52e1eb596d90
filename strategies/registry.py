"""Strategy registry: maps config strings to Strategy subclasses.

Usage::

    from strategies.registry import create_strategy

    strategy = create_strategy(strategy_config)
"""

from __future__ import annotations

from typing import Type

from models.config import StrategyConfig
from strategies.base import Strategy

# ---------------------------------------------------------------------------
# Registry mapping
# ---------------------------------------------------------------------------
_REGISTRY: dict[str, Type[Strategy]] = {}


def register(name: str):
    """Decorator to register a ``Strategy`` subclass under *name*."""

    def _decorator(cls: Type[Strategy]) -> Type[Strategy]:
        if name in _REGISTRY:
            raise ValueError(f"Strategy '{name}' is already registered.")
        _REGISTRY[name] = cls
        return cls

    return _decorator


def available_strategies() -> list[str]:
    _ensure_builtins_loaded()
    return sorted(_REGISTRY)


def create_strategy(config: StrategyConfig) -> Strategy:
    """Instantiate the strategy specified in *config*.

    Raises ``KeyError`` if ``config.name`` is not registered.
    """
    # Lazy-import concrete implementations so they self-register.
    _ensure_builtins_loaded()

    key = config.name
    if key not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY)) or "(none)"
        raise KeyError(f"Unknown strategy '{key}'. Available: {available}.")
    return _REGISTRY[key](config)


def _ensure_builtins_loaded() -> None:
    """Import built-in strategy modules so their ``@register`` calls execute."""
    import strategies.hold  # noqa: F401
    import strategies.momentum  # noqa: F401
