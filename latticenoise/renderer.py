"""Turn a 2D lattice into a grayscale image.

Each output pixel is mapped into lattice space by dividing by a scale
factor, sampled with plain noise or a fractal sum, clamped to [0, 1] and
stretched to 0-255. File encoding is left to Pillow.
"""

import logging
from dataclasses import dataclass, field

import numpy as np
from PIL import Image

from .errors import InvalidDimensions, InvalidLength
from .fractal import FractalSumOptions, fsum2d_array, fsum_max_value
from .interpolate import Interpolation
from .noise import noise2d_array

logger = logging.getLogger(__name__)

# Image formats that store width and height as 16-bit fields (TGA) cap
# a raw lattice dump at this many cells per side.
MAX_IMAGE_SIDE = 65535


@dataclass
class RenderConfig:
    """Configuration for rendering noise to an image."""

    # Device pixels per lattice cell
    scale: float = 4.0

    # Fractal sum instead of single-octave noise
    fractal: bool = False
    options: FractalSumOptions = field(default_factory=FractalSumOptions)
    # Divide fractal sums by their analytic maximum
    normalize: bool = True

    interpolation: Interpolation = Interpolation.CATMULL_ROM

    # Pillow image mode, "L" or "RGB"
    mode: str = "L"


def sample(lattice, width, height, config=None):
    """Sample noise for every pixel of a ``width`` x ``height`` image.

    Args:
        lattice: A 2D lattice.
        width: Output width in pixels.
        height: Output height in pixels.
        config: RenderConfig instance (defaults used if None).

    Returns:
        Array of shape (height, width) with values in [0, 1].
    """
    if config is None:
        config = RenderConfig()
    if lattice.dimensions != 2:
        raise InvalidDimensions(
            f"rendering needs a 2D lattice, got {lattice.dimensions}D"
        )

    # Continuous sample coordinates in lattice space
    xs = np.arange(width, dtype=np.float64)[np.newaxis, :] / config.scale
    ys = np.arange(height, dtype=np.float64)[:, np.newaxis] / config.scale

    if config.fractal:
        values = fsum2d_array(lattice, xs, ys, config.options,
                              config.interpolation)
        if config.normalize:
            values = values / fsum_max_value(config.options)
    else:
        values = noise2d_array(lattice, xs, ys, config.interpolation)

    return np.clip(values, 0.0, 1.0)


def to_image(values, mode="L"):
    """Convert an array of [0, 1] values to an 8-bit Pillow image."""
    gray = (np.clip(values, 0.0, 1.0) * 255.9).astype(np.uint8)
    if mode == "RGB":
        return Image.fromarray(np.stack([gray, gray, gray], axis=2))
    if mode != "L":
        raise ValueError(f"unsupported image mode {mode!r}")
    return Image.fromarray(gray)


def render(lattice, width, height, config=None):
    """Render lattice noise to an image.

    Args:
        lattice: A 2D lattice.
        width: Output width in pixels.
        height: Output height in pixels.
        config: RenderConfig instance (defaults used if None).

    Returns:
        PIL Image in ``config.mode``.
    """
    if config is None:
        config = RenderConfig()
    logger.debug("Rendering %dx%d from %r (scale=%s fractal=%s)",
                 width, height, lattice, config.scale, config.fractal)
    return to_image(sample(lattice, width, height, config), config.mode)


def lattice_image(lattice, mode="L"):
    """Render the raw samples of a 2D lattice, one pixel per cell."""
    if lattice.dimensions != 2:
        raise InvalidDimensions(
            f"only 2D lattices can be shown as images, got {lattice.dimensions}D"
        )
    if lattice.dim_length > MAX_IMAGE_SIDE:
        raise InvalidLength(
            f"dim_length {lattice.dim_length} exceeds image side limit {MAX_IMAGE_SIDE}"
        )
    side = lattice.dim_length
    return to_image(lattice.values.reshape(side, side), mode)
