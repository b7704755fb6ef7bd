from __future__ import annotations

"""Weighted item selection favoring fresh and frequently-missed items."""

import random
from typing import Any, List, Sequence

from ..storage.schema import Item

FRESHNESS_SCALE = 2.0
UNSEEN_DIFFICULTY = 0.5


def item_weight(item: Item) -> float:
    """freshness * 2 + difficulty; always > 0.

    Unseen items get a neutral difficulty of 0.5.
    """
    freshness = 1.0 / (item.times_asked + 1)
    if item.times_asked > 0:
        difficulty = 1.0 - item.times_correct / item.times_asked
    else:
        difficulty = UNSEEN_DIFFICULTY
    return freshness * FRESHNESS_SCALE + difficulty


def weights(pool: Sequence[Item]) -> List[float]:
    return [item_weight(it) for it in pool]


def pick(pool: Sequence[Item], rng: Any = random) -> Item:
    """Pick one item from the pool with probability proportional to its weight.

    Returns the pool's own object so callers can update its counters in place.
    """
    if not pool:
        raise ValueError("cannot pick from an empty pool")
    ws = weights(pool)
    remaining = rng.random() * sum(ws)
    for it, w in zip(pool, ws):
        remaining -= w
        if remaining <= 0:
            return it
    # Float rounding can leave a sliver after the last subtraction.
    return pool[-1]
