"""Random source seam for the engine.

Every random draw the engine makes goes through a ``RandomSource`` passed in
by the caller. ``random.Random`` satisfies the protocol; tests substitute a
scripted source to force event and direction outcomes.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    def random(self) -> float:
        """Return a float in ``[0.0, 1.0)``."""

    def uniform(self, a: float, b: float) -> float:
        """Return a float between *a* and *b*."""

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of a non-empty *seq*."""

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """Return *k* distinct elements of *population*."""


def make_rng(seed: int | None = None) -> random.Random:
    """Build an independent ``random.Random``; ``None`` seeds from OS entropy."""
    return random.Random(seed)
