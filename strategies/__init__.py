"""Automated players that trade against the simulated market."""

from strategies.base import Strategy
from strategies.registry import available_strategies, create_strategy, register

__all__ = ["Strategy", "available_strategies", "create_strategy", "register"]
