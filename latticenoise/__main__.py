"""CLI entry point for latticenoise (``mknoise``)."""

import argparse
import logging
from pathlib import Path

from . import generate
from .errors import LatticeError
from .fractal import FractalSumOptions
from .interpolate import Interpolation
from .lattice import build
from .renderer import RenderConfig, lattice_image
from .rng import NumpyRandomSource


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="mknoise",
        description="Render tiling lattice noise to an image (TGA, PNG, BMP, ...)"
    )
    parser.add_argument(
        "--output", "-o", default="noise.tga",
        help="Output file path; format follows the extension (default: noise.tga)"
    )
    parser.add_argument(
        "--width", "-W", type=int, default=512,
        help="Output image width in pixels (default: 512)"
    )
    parser.add_argument(
        "--height", "-H", type=int, default=512,
        help="Output image height in pixels (default: 512)"
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducible generation"
    )
    parser.add_argument(
        "--lattice-size", "-l", type=int, default=128,
        help="Lattice cells per side (default: 128)"
    )
    parser.add_argument(
        "--scale", type=float, default=4.0,
        help="Pixels per lattice cell (default: 4.0)"
    )
    parser.add_argument(
        "--fractal", action="store_true",
        help="Render a normalized fractal sum instead of plain noise"
    )
    parser.add_argument(
        "--octaves", type=int, default=4,
        help="Fractal sum octave count (default: 4)"
    )
    parser.add_argument(
        "--amplitude-ratio", type=float, default=0.5,
        help="Amplitude multiplier per octave (default: 0.5)"
    )
    parser.add_argument(
        "--frequency-ratio", type=float, default=2.0,
        help="Frequency multiplier per octave (default: 2.0)"
    )
    parser.add_argument(
        "--offset", type=float, default=0.0,
        help="Constant added to the fractal sum (default: 0.0)"
    )
    parser.add_argument(
        "--interpolation", choices=[i.value for i in Interpolation],
        default=Interpolation.CATMULL_ROM.value,
        help="Spline used between lattice samples (default: catmull-rom)"
    )
    parser.add_argument(
        "--raw", action="store_true",
        help="Write the lattice samples themselves, one pixel per cell"
    )
    parser.add_argument(
        "--verbose", "-v", action="count", default=0,
        help="Log progress (-vv for debug output)"
    )

    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    config = RenderConfig(
        scale=args.scale,
        fractal=args.fractal,
        options=FractalSumOptions(
            n=args.octaves,
            amplitude_ratio=args.amplitude_ratio,
            frequency_ratio=args.frequency_ratio,
            offset=args.offset,
        ),
        interpolation=Interpolation(args.interpolation),
    )

    try:
        if args.raw:
            lattice = build(2, args.lattice_size, NumpyRandomSource(args.seed))
            image = lattice_image(lattice)
        else:
            image = generate(
                width=args.width,
                height=args.height,
                lattice_size=args.lattice_size,
                seed=args.seed,
                config=config,
            )
    except LatticeError as err:
        parser.error(str(err))

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output))
    print(f"Saved noise ({image.size[0]}x{image.size[1]}) to {output}")


if __name__ == "__main__":
    main()
