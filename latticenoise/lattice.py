"""The sample lattice that every noise function interpolates over.

A lattice is an N-dimensional, hypercubic grid of scalar samples in
[0, 1], stored flat with axis 0 varying fastest::

    index = c0 + c1 * L + c2 * L**2 + ... + c{N-1} * L**(N-1)

It is built once from a random source and never written to again, so a
single lattice can be read from any number of threads.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np

from .errors import AllocationFailure, InvalidDimensions, InvalidLength, SizeOverflow
from .rng import NumpyRandomSource

logger = logging.getLogger(__name__)

# Largest number of samples a lattice may hold (unsigned 32-bit size).
MAX_SIZE = 2**32 - 1

# Returned instead of a sample when a query is outside the lattice's domain.
OUT_OF_DOMAIN = math.inf


@dataclass(frozen=True, eq=False)
class Lattice:
    """An immutable grid of samples.

    Use :func:`build` rather than constructing this directly.
    """

    values: np.ndarray
    dim_length: int
    dimensions: int
    seed: int

    @property
    def size(self):
        return int(self.values.shape[0])

    def value(self, *coords):
        """Sample at integer ``coords`` (one per dimension).

        Returns ``OUT_OF_DOMAIN`` if the number of coordinates does not
        match ``dimensions`` or any coordinate is outside [0, dim_length).
        """
        if len(coords) != self.dimensions:
            return OUT_OF_DOMAIN
        index = 0
        stride = 1
        for c in coords:
            if not 0 <= c < self.dim_length:
                return OUT_OF_DOMAIN
            index += int(c) * stride
            stride *= self.dim_length
        return float(self.values[index])

    def value1(self, x):
        return self.value(x) if self.dimensions == 1 else OUT_OF_DOMAIN

    def value2(self, x, y):
        return self.value(x, y) if self.dimensions == 2 else OUT_OF_DOMAIN

    def value3(self, x, y, z):
        return self.value(x, y, z) if self.dimensions == 3 else OUT_OF_DOMAIN

    def value4(self, x, y, z, w):
        return self.value(x, y, z, w) if self.dimensions == 4 else OUT_OF_DOMAIN

    def __repr__(self):
        return (f"Lattice(dimensions={self.dimensions}, "
                f"dim_length={self.dim_length}, seed={self.seed})")


def lattice_size(dimensions, dim_length):
    """Return pow(dim_length, dimensions), raising if it exceeds MAX_SIZE.

    Stops multiplying as soon as the bound is crossed so absurd
    dimension counts fail fast.
    """
    if dim_length == 1:
        return 1
    size = 1
    for _ in range(dimensions):
        size *= dim_length
        if size > MAX_SIZE:
            raise SizeOverflow(
                f"{dim_length}^{dimensions} samples exceeds the limit of {MAX_SIZE}"
            )
    return size


def build(dimensions, dim_length, rng=None):
    """Create a lattice and fill it from a random source.

    Args:
        dimensions: Number of axes, >= 1.
        dim_length: Samples per axis, >= 1. The lattice holds
            ``dim_length ** dimensions`` samples, at most 2^32 - 1.
        rng: A :class:`~latticenoise.rng.RandomSource`. When omitted a
            time-seeded :class:`~latticenoise.rng.NumpyRandomSource` is
            used; its seed is recorded on the lattice.

    Returns:
        A fully populated :class:`Lattice`.

    Raises:
        InvalidDimensions, InvalidLength, SizeOverflow, AllocationFailure
    """
    if dimensions < 1:
        raise InvalidDimensions(f"dimensions must be >= 1, got {dimensions}")
    if dim_length < 1:
        raise InvalidLength(f"dim_length must be >= 1, got {dim_length}")
    dimensions = int(dimensions)
    dim_length = int(dim_length)

    size = lattice_size(dimensions, dim_length)

    try:
        values = np.empty(size, dtype=np.float64)
    except MemoryError as exc:
        raise AllocationFailure(f"could not allocate {size} samples") from exc

    if rng is None:
        rng = NumpyRandomSource()

    # Lexicographic fill, one draw per cell.
    for i in range(size):
        values[i] = rng.next_float()
    np.clip(values, 0.0, 1.0, out=values)
    values.flags.writeable = False

    logger.debug("Built %dD lattice: dim_length=%d size=%d seed=%s",
                 dimensions, dim_length, size, rng.seed)

    return Lattice(values=values, dim_length=dim_length,
                   dimensions=dimensions, seed=rng.seed)


def value1(lattice, x):
    """Sample of a 1D lattice, or ``OUT_OF_DOMAIN``."""
    return lattice.value1(x)


def value2(lattice, x, y):
    """Sample of a 2D lattice, or ``OUT_OF_DOMAIN``."""
    return lattice.value2(x, y)


def value3(lattice, x, y, z):
    """Sample of a 3D lattice, or ``OUT_OF_DOMAIN``."""
    return lattice.value3(x, y, z)


def value4(lattice, x, y, z, w):
    """Sample of a 4D lattice, or ``OUT_OF_DOMAIN``."""
    return lattice.value4(x, y, z, w)
