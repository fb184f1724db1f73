"""Fractal sums (turbulence) of lattice noise across several octaves."""

import math
from dataclasses import dataclass

import numpy as np

from .errors import InvalidOptions
from .interpolate import Interpolation
from .lattice import OUT_OF_DOMAIN
from .noise import noise1d, noise1d_array, noise2d, noise2d_array


@dataclass
class FractalSumOptions:
    """Octave layout of a fractal sum."""

    # Number of octaves, >= 1
    n: int = 4
    # Amplitude multiplier per octave (persistence)
    amplitude_ratio: float = 0.5
    # Frequency multiplier per octave (lacunarity)
    frequency_ratio: float = 2.0
    # Added to the sum before any octave
    offset: float = 0.0


def default_fsum_options():
    return FractalSumOptions()


def _check_options(options):
    if options.n < 1:
        raise InvalidOptions(f"fractal sum needs at least one octave, got n={options.n}")


def _octaves(options):
    """Yield (amplitude, frequency) for each octave."""
    amplitude = 1.0
    frequency = 1.0
    for _ in range(options.n):
        yield amplitude, frequency
        amplitude *= options.amplitude_ratio
        frequency *= options.frequency_ratio


def fsum_max_value(options):
    """Upper bound of a fractal sum whose every sample is 1.0.

    Sum of the geometric series of octave amplitudes, ``n`` when the
    ratio is exactly 1. Dividing an ``fsum`` result by this brings it back
    to [0, 1] (for a zero offset).
    """
    _check_options(options)
    r = options.amplitude_ratio
    if r == 1.0:
        return float(options.n)
    try:
        power = r ** options.n
    except OverflowError:
        # Same infinity the octave loop reaches
        power = math.copysign(math.inf, r) if options.n % 2 else math.inf
    return (1.0 - power) / (1.0 - r)


def fsum1d(lattice, x, options=None, interpolation=Interpolation.CATMULL_ROM):
    """Fractal sum of :func:`~latticenoise.noise.noise1d` at ``x``.

    Raises:
        InvalidOptions: if ``options.n < 1``.

    Returns ``OUT_OF_DOMAIN`` when the lattice is not 1D or ``x`` is not
    finite.
    """
    if options is None:
        options = default_fsum_options()
    _check_options(options)
    if lattice.dimensions != 1 or not math.isfinite(x):
        return OUT_OF_DOMAIN

    result = options.offset
    for amplitude, frequency in _octaves(options):
        result += amplitude * noise1d(lattice, frequency * x, interpolation)
    return result


def fsum2d(lattice, x, y, options=None, interpolation=Interpolation.CATMULL_ROM):
    """Fractal sum of :func:`~latticenoise.noise.noise2d` at ``(x, y)``.

    Raises:
        InvalidOptions: if ``options.n < 1``.

    Returns ``OUT_OF_DOMAIN`` when the lattice is not 2D or a coordinate
    is not finite.
    """
    if options is None:
        options = default_fsum_options()
    _check_options(options)
    if lattice.dimensions != 2 or not (math.isfinite(x) and math.isfinite(y)):
        return OUT_OF_DOMAIN

    result = options.offset
    for amplitude, frequency in _octaves(options):
        result += amplitude * noise2d(lattice, frequency * x, frequency * y,
                                      interpolation)
    return result


def fsum1d_array(lattice, x, options=None, interpolation=Interpolation.CATMULL_ROM):
    """Elementwise :func:`fsum1d` over an array of coordinates."""
    if options is None:
        options = default_fsum_options()
    _check_options(options)
    x = np.asarray(x, dtype=np.float64)
    if lattice.dimensions != 1:
        return np.full(x.shape, OUT_OF_DOMAIN)

    result = np.full(x.shape, options.offset, dtype=np.float64)
    for amplitude, frequency in _octaves(options):
        result += amplitude * noise1d_array(lattice, frequency * x, interpolation)
    return np.where(np.isfinite(x), result, OUT_OF_DOMAIN)


def fsum2d_array(lattice, x, y, options=None, interpolation=Interpolation.CATMULL_ROM):
    """Elementwise :func:`fsum2d`; ``x`` and ``y`` broadcast together."""
    if options is None:
        options = default_fsum_options()
    _check_options(options)
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                               np.asarray(y, dtype=np.float64))
    if lattice.dimensions != 2:
        return np.full(x.shape, OUT_OF_DOMAIN)

    result = np.full(x.shape, options.offset, dtype=np.float64)
    for amplitude, frequency in _octaves(options):
        result += amplitude * noise2d_array(lattice, frequency * x, frequency * y,
                                            interpolation)
    return np.where(np.isfinite(x) & np.isfinite(y), result, OUT_OF_DOMAIN)
