"""Continuous, infinitely tiling noise built on a sample lattice.

A coordinate is split into a lattice index and a fractional remainder. The
four samples around the index (i-1, i, i+1, i+2) are wrapped into the
lattice and blended with a cubic spline. Coordinates are reduced by
absolute value first, so ``noise1d(l, -x) == noise1d(l, x)``.

Scalar functions take and return floats. The ``*_array`` variants take
numpy arrays of coordinates and evaluate the same arithmetic elementwise.
"""

import math

import numpy as np

from .interpolate import Interpolation, interpolate
from .lattice import OUT_OF_DOMAIN

NEIGHBOUR_OFFSETS = (-1, 0, 1, 2)


def wrap(k, length):
    """Map any integer onto [0, length) so the lattice repeats forever."""
    return ((k % length) + length) % length


def split_coordinate(x):
    """Return (integer index, fraction in [0, 1)) of ``abs(x)``."""
    x = abs(x)
    i = math.floor(x)
    return i, x - i


def neighbours(i, length):
    """The four wrapped indices a cubic spline around ``i`` needs."""
    return [wrap(i + k, length) for k in NEIGHBOUR_OFFSETS]


def noise1d(lattice, x, interpolation=Interpolation.CATMULL_ROM):
    """Smooth 1D noise at ``x``.

    Returns ``OUT_OF_DOMAIN`` for a lattice that is not 1D or a
    non-finite ``x``. The result is not clamped.
    """
    if lattice.dimensions != 1 or not math.isfinite(x):
        return OUT_OF_DOMAIN

    i, r = split_coordinate(x)
    p0, p1, p2, p3 = (lattice.value1(k) for k in neighbours(i, lattice.dim_length))
    return interpolate(interpolation, p0, p1, p2, p3, r)


def noise2d(lattice, x, y, interpolation=Interpolation.CATMULL_ROM):
    """Smooth 2D noise at ``(x, y)``, clamped to [0, 1].

    Each of the four neighbouring rows is interpolated across x, then the
    four row results are interpolated across y.

    Returns ``OUT_OF_DOMAIN`` for a lattice that is not 2D or non-finite
    coordinates.
    """
    if lattice.dimensions != 2 or not (math.isfinite(x) and math.isfinite(y)):
        return OUT_OF_DOMAIN

    length = lattice.dim_length
    ix, rx = split_coordinate(x)
    iy, ry = split_coordinate(y)
    columns = neighbours(ix, length)

    rows = []
    for row in neighbours(iy, length):
        p0, p1, p2, p3 = (lattice.value2(col, row) for col in columns)
        rows.append(interpolate(interpolation, p0, p1, p2, p3, rx))

    v = interpolate(interpolation, rows[0], rows[1], rows[2], rows[3], ry)
    return min(max(v, 0.0), 1.0)


# ---------------------------------------------------------------------------
# Vectorized forms
# ---------------------------------------------------------------------------

def _split_array(x, length):
    """Array form of :func:`split_coordinate`, index already wrapped.

    The index is reduced modulo ``length`` while still a float so huge
    coordinates never overflow the integer cast. Non-finite entries
    become 0.
    """
    x = np.abs(np.asarray(x, dtype=np.float64))
    bad = ~np.isfinite(x)
    x = np.where(bad, 0.0, x)
    i = np.floor(x)
    return np.mod(i, length).astype(np.int64), x - i, bad


def noise1d_array(lattice, x, interpolation=Interpolation.CATMULL_ROM):
    """Evaluate :func:`noise1d` at every element of ``x``.

    Returns:
        float64 array shaped like ``x``.
    """
    x = np.asarray(x, dtype=np.float64)
    if lattice.dimensions != 1:
        return np.full(x.shape, OUT_OF_DOMAIN)

    length = lattice.dim_length
    i, r, bad = _split_array(x, length)
    p = [lattice.values[np.mod(i + k, length)] for k in NEIGHBOUR_OFFSETS]
    result = interpolate(interpolation, p[0], p[1], p[2], p[3], r)
    return np.where(bad, OUT_OF_DOMAIN, result)


def noise2d_array(lattice, x, y, interpolation=Interpolation.CATMULL_ROM):
    """Evaluate :func:`noise2d` at every ``(x, y)`` pair.

    ``x`` and ``y`` are broadcast against each other, so a row of x
    coordinates and a column of y coordinates give a full grid.

    Returns:
        float64 array of the broadcast shape, values in [0, 1] except
        for ``OUT_OF_DOMAIN`` entries.
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                               np.asarray(y, dtype=np.float64))
    if lattice.dimensions != 2:
        return np.full(x.shape, OUT_OF_DOMAIN)

    length = lattice.dim_length
    ix, rx, bad_x = _split_array(x, length)
    iy, ry, bad_y = _split_array(y, length)
    columns = [np.mod(ix + k, length) for k in NEIGHBOUR_OFFSETS]

    rows = []
    for k in NEIGHBOUR_OFFSETS:
        base = np.mod(iy + k, length) * length
        p = [lattice.values[base + col] for col in columns]
        rows.append(interpolate(interpolation, p[0], p[1], p[2], p[3], rx))

    v = interpolate(interpolation, rows[0], rows[1], rows[2], rows[3], ry)
    v = np.clip(v, 0.0, 1.0)
    return np.where(bad_x | bad_y, OUT_OF_DOMAIN, v)
