"""Cubic splines used to blend four neighbouring lattice samples.

Every function here is plain arithmetic, so it accepts Python floats or
numpy arrays (elementwise) alike. None of them clamp: results may stray a
little outside the range of the inputs.
"""

import enum


class Interpolation(enum.Enum):
    CATMULL_ROM = "catmull-rom"
    HERMITE = "hermite"


def catmull_rom(p0, p1, p2, p3, t):
    """Catmull-Rom spline through p1 (t=0) and p2 (t=1)."""
    fd0 = (p2 - p0) / 2
    fd1 = (p3 - p1) / 2

    a = 2 * p1 - 2 * p2 + fd0 + fd1
    b = -3 * p1 + 3 * p2 - 2 * fd0 - fd1
    c = fd0
    d = p1

    t2 = t * t
    t3 = t2 * t
    return a * t3 + b * t2 + c * t + d


def hermite(p0, p1, m0, m1, t):
    """Cubic Hermite spline from p0 to p1 with tangents m0, m1."""
    t2 = t * t
    t3 = t2 * t
    h00 = 2 * t3 - 3 * t2 + 1
    h10 = t3 - 2 * t2 + t
    h01 = -2 * t3 + 3 * t2
    h11 = t3 - t2
    return h00 * p0 + h10 * m0 + h01 * p1 + h11 * m1


def hermite_samples(p0, p1, p2, p3, t):
    """Hermite spline between p1 and p2, tangents from the outer samples."""
    m0 = (p2 - p0) / 3
    m1 = (p3 - p1) / 3
    return hermite(p1, p2, m0, m1, t)


_SCHEMES = {
    Interpolation.CATMULL_ROM: catmull_rom,
    Interpolation.HERMITE: hermite_samples,
}


def interpolate(kind, p0, p1, p2, p3, t):
    """Blend four consecutive samples with the chosen scheme."""
    return _SCHEMES[Interpolation(kind)](p0, p1, p2, p3, t)
