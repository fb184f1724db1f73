"""latticenoise - Deterministic, tiling lattice noise and fractal sums."""

import logging

from .errors import (
    AllocationFailure,
    InvalidDimensions,
    InvalidLength,
    InvalidOptions,
    LatticeError,
    SizeOverflow,
)
from .fractal import (
    FractalSumOptions,
    default_fsum_options,
    fsum1d,
    fsum2d,
    fsum_max_value,
)
from .interpolate import Interpolation
from .lattice import OUT_OF_DOMAIN, Lattice, build, value1, value2, value3, value4
from .noise import noise1d, noise2d
from .point import Point
from .renderer import RenderConfig, render
from .rng import NumpyRandomSource, RandomSource

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "AllocationFailure", "FractalSumOptions", "Interpolation",
    "InvalidDimensions", "InvalidLength", "InvalidOptions", "Lattice",
    "LatticeError", "NumpyRandomSource", "OUT_OF_DOMAIN", "Point",
    "RandomSource", "RenderConfig", "SizeOverflow", "build",
    "default_fsum_options", "fsum1d", "fsum2d", "fsum_max_value",
    "generate", "noise1d", "noise2d", "render", "value1", "value2",
    "value3", "value4",
]


def generate(width, height, lattice_size=128, seed=None, **kwargs):
    """Build a 2D lattice and render it to an image in one step.

    Args:
        width: Output image width in pixels.
        height: Output image height in pixels.
        lattice_size: Lattice cells per side. The image tiles every
            ``lattice_size * scale`` pixels.
        seed: Random seed for reproducible noise.
        **kwargs: Either ``config=RenderConfig(...)`` or individual
            RenderConfig fields (scale, fractal, options, ...), not both.

    Returns:
        PIL Image in mode "L" (or "RGB" if requested).
    """
    config = kwargs.pop("config", None)
    if config is None:
        config = RenderConfig(**kwargs)
    elif kwargs:
        raise TypeError(
            f"generate() got both config and RenderConfig fields: {sorted(kwargs)}"
        )
    lattice = build(2, lattice_size, NumpyRandomSource(seed))
    return render(lattice, width, height, config=config)
