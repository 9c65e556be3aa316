"""Seeded random source used by the generator.

The generator only needs a handful of integer draws, so this is a small
wrapper over :func:`numpy.random.default_rng`.  An unseeded instance picks
its own seed and keeps it in ``initial_seed`` so any dungeon can be replayed
later.
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

import numpy as np


class DungeonRNG:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.initial_seed = seed if seed is not None else random.randint(0, 2**32 - 1)
        self.rng = np.random.default_rng(self.initial_seed)

    # ------------------------------------------------------------------
    # basic random helpers
    # ------------------------------------------------------------------
    def get_int(self, a: int, b: int) -> int:
        """Uniform integer in the closed range ``[a, b]``."""
        if a > b:
            raise ValueError("a <= b")
        return int(self.rng.integers(a, b + 1))

    def get_randrange(self, stop: int) -> int:
        """Uniform integer in the half-open range ``[0, stop)``."""
        if stop <= 0:
            raise ValueError("empty range")
        return self.get_int(0, stop - 1)

    # ------------------------------------------------------------------
    # state management
    # ------------------------------------------------------------------
    def get_state(self) -> Dict[str, Any]:
        return {
            "random_state": self.rng.bit_generator.state,
            "initial_seed": self.initial_seed,
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        if "random_state" in state:
            self.rng.bit_generator.state = state["random_state"]
        if "initial_seed" in state:
            self.initial_seed = state["initial_seed"]


__all__ = ["DungeonRNG"]
