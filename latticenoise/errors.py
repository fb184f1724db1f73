"""Exceptions raised when a lattice or its options cannot be used."""


class LatticeError(ValueError):
    """Base class for lattice construction and configuration errors."""


class InvalidDimensions(LatticeError):
    """The lattice needs at least one dimension."""


class InvalidLength(LatticeError):
    """The per-axis length is out of range."""


class SizeOverflow(LatticeError):
    """pow(dim_length, dimensions) does not fit in an unsigned 32-bit size."""


class AllocationFailure(LatticeError):
    """The sample buffer could not be allocated."""


class InvalidOptions(LatticeError):
    """Fractal sum options are unusable (e.g. zero octaves)."""
