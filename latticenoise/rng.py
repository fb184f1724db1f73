"""Random sources used to fill a lattice."""

import time
from typing import Protocol

import numpy as np


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1).

    ``seed`` is whatever value initialized the source; it is recorded on the
    lattice for reproducibility and never reused automatically.
    """

    seed: int

    def next_float(self) -> float:
        ...


def time_seed():
    """Seed derived from the wall clock, kept inside the uint32 range."""
    return (int(time.time()) * 241) % 2**32


class NumpyRandomSource:
    """Default source backed by ``numpy.random.RandomState``.

    Not cryptographically secure. It exists to make textures, nothing
    security-sensitive should draw from it.

    Args:
        seed: Integer seed. When omitted a time-derived seed is chosen
            and exposed as ``self.seed``.
    """

    def __init__(self, seed=None):
        if seed is None:
            seed = time_seed()
        self.seed = int(seed)
        self._rng = np.random.RandomState(self.seed % 2**32)

    def next_float(self):
        return float(self._rng.random_sample())

    def __repr__(self):
        return f"NumpyRandomSource(seed={self.seed})"
