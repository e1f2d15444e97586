"""Random-number helpers shared by the game."""

from __future__ import annotations

import random

_rng = random.Random()


def init_random(seed: int | float | str | bytes | None = None) -> None:
    """Seed the shared generator; with no seed, seed it from system entropy."""
    _rng.seed(seed)


def int_uniform_rnd(a: int, b: int) -> int:
    """Return an integer drawn uniformly from the closed range [a, b]."""
    if b < a:
        raise ValueError(f"empty range [{a}, {b}]")
    return _rng.randint(a, b)


def prob_event(prob: float) -> bool:
    """Return True with probability ``prob``."""
    return prob > _rng.random()