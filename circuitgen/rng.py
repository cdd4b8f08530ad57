"""Deterministic pseudo-random stream driving every generation pass."""

from __future__ import annotations

import math
from typing import List, MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class RNG:
    """Single-state random stream.

    Every draw advances ``state`` through ``|sin(state * 128 + 0.1) * 100| mod 1``.
    The stream cannot seek or fork, so callers must consume draws in a fixed
    order for a seed to reproduce the same artwork.
    """

    def __init__(self, seed: float) -> None:
        state = float(seed)
        if not math.isfinite(state):
            raise ValueError(f"RNG seed must be finite, got {seed!r}")
        self.state = state

    def random(self) -> float:
        self.state = math.fmod(abs(math.sin(self.state * 128 + 0.1) * 100), 1.0)
        return self.state

    def uniform(self, low: float, high: float) -> float:
        return low + self.random() * (high - low)

    def integer(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``."""

        return math.floor(self.uniform(low, high))

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Fisher-Yates in place, drawing swap indices from the last slot down."""

        for i in range(len(items) - 1, 0, -1):
            j = self.integer(0, i + 1)
            items[i], items[j] = items[j], items[i]

    def choose(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("choose requires a non-empty sequence")
        return items[self.integer(0, len(items))]

    def choose_weighted(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one element with probability proportional to its weight.

        Falls back to the last element when rounding leaves the cumulative sum
        just below the drawn threshold.
        """

        if not items:
            raise ValueError("choose_weighted requires a non-empty sequence")
        if len(items) != len(weights):
            raise ValueError(
                f"choose_weighted got {len(items)} item(s) but {len(weights)} weight(s)"
            )
        total = sum(weights)
        if not total > 0:
            raise ValueError("choose_weighted requires a positive total weight")
        normalized: List[float] = [weight / total for weight in weights]

        threshold = self.random()
        cumulative = 0.0
        for item, weight in zip(items, normalized):
            cumulative += weight
            if cumulative >= threshold:
                return item
        return items[-1]


__all__ = ["RNG"]
