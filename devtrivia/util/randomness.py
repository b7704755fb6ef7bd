from __future__ import annotations

"""Seeding helper for reproducible selection runs."""

import os
import random


def seed_if_needed() -> bool:
    """Seed the module RNG from the SEED env var.

    Returns True when a valid seed was applied.
    """
    seed = os.environ.get("SEED")
    if seed is None:
        return False
    try:
        s = int(seed)
    except ValueError:
        print(f"WARNING: Ignoring non-integer SEED '{seed}'.")
        return False
    random.seed(s)
    return True
