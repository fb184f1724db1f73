import numpy as np
import pytest


class SequenceSource:
    """Replays a fixed list of samples, cycling when it runs out."""

    def __init__(self, values, seed=0):
        self._values = list(values)
        self._pos = 0
        self.seed = seed

    def next_float(self):
        v = self._values[self._pos % len(self._values)]
        self._pos += 1
        return v


@pytest.fixture
def sequence_source():
    return SequenceSource


@pytest.fixture
def lattice_1d():
    from latticenoise import build
    return build(1, 4, SequenceSource([0.1, 0.9, 0.2, 0.7]))


@pytest.fixture
def random_lattice():
    """Factory for seeded lattices of any shape."""
    from latticenoise import build, NumpyRandomSource

    def make(dimensions, dim_length, seed=1234):
        return build(dimensions, dim_length, NumpyRandomSource(seed))

    return make


@pytest.fixture
def coords():
    return np.linspace(0.0, 23.0, 97)
