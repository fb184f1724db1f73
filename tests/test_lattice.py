"""Lattice construction and raw sample access."""

import math

import numpy as np
import pytest

from latticenoise import (
    AllocationFailure,
    InvalidDimensions,
    InvalidLength,
    NumpyRandomSource,
    OUT_OF_DOMAIN,
    SizeOverflow,
    build,
    value1,
    value2,
    value3,
    value4,
)
from latticenoise.lattice import MAX_SIZE, lattice_size


@pytest.mark.parametrize("dimensions,dim_length", [
    (1, 1), (1, 4), (1, 1000), (2, 1), (2, 16), (3, 5), (4, 3), (6, 2),
])
def test_build_size_and_range(dimensions, dim_length):
    lattice = build(dimensions, dim_length, NumpyRandomSource(5))
    assert lattice.size == dim_length ** dimensions
    assert lattice.values.shape == (dim_length ** dimensions,)
    assert lattice.dimensions == dimensions
    assert lattice.dim_length == dim_length
    assert lattice.values.min() >= 0.0
    assert lattice.values.max() <= 1.0


@pytest.mark.parametrize("dimensions,dim_length", [
    (1, 2**32), (2, 2**16), (4, 256), (32, 2), (3, 2**11), (1000, 3),
])
def test_build_size_overflow(dimensions, dim_length):
    with pytest.raises(SizeOverflow):
        build(dimensions, dim_length, NumpyRandomSource(1))


def test_lattice_size_at_limit():
    assert lattice_size(1, MAX_SIZE) == MAX_SIZE
    assert lattice_size(10**6, 1) == 1
    with pytest.raises(SizeOverflow):
        lattice_size(1, MAX_SIZE + 1)


def test_build_rejects_bad_shape():
    with pytest.raises(InvalidDimensions):
        build(0, 4)
    with pytest.raises(InvalidLength):
        build(2, 0)
    # Both are ValueErrors too
    with pytest.raises(ValueError):
        build(-1, 4)


def test_build_allocation_failure(monkeypatch):
    from latticenoise import lattice as lattice_mod

    def fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(lattice_mod.np, "empty", fail)
    with pytest.raises(AllocationFailure):
        build(2, 8, NumpyRandomSource(1))


def test_build_clamps_samples(sequence_source):
    lattice = build(1, 4, sequence_source([-0.5, 1.5, 0.3, 1.0]))
    assert list(lattice.values) == [0.0, 1.0, 0.3, 1.0]


def test_fill_order_axis0_fastest(sequence_source):
    lattice = build(2, 2, sequence_source([0.1, 0.2, 0.3, 0.4]))
    assert lattice.value2(0, 0) == 0.1
    assert lattice.value2(1, 0) == 0.2
    assert lattice.value2(0, 1) == 0.3
    assert lattice.value2(1, 1) == 0.4


def test_value3_value4_index_formula(sequence_source):
    l3 = build(3, 3, sequence_source([i / 100 for i in range(27)]))
    for x, y, z in [(0, 0, 0), (2, 0, 0), (0, 2, 0), (1, 2, 2), (2, 2, 2)]:
        assert value3(l3, x, y, z) == (x + 3 * y + 9 * z) / 100

    l4 = build(4, 2, sequence_source([i / 100 for i in range(16)]))
    for x, y, z, w in [(1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1), (1, 1, 1, 1)]:
        assert value4(l4, x, y, z, w) == (x + 2 * y + 4 * z + 8 * w) / 100


def test_generalized_value_matches_named_accessors(random_lattice):
    lattice = random_lattice(2, 6)
    for x in range(6):
        for y in range(6):
            assert lattice.value(x, y) == value2(lattice, x, y)
    l5 = random_lattice(5, 3)
    assert l5.value(1, 2, 0, 1, 2) == l5.values[1 + 2 * 3 + 0 * 9 + 1 * 27 + 2 * 81]


def test_dimension_mismatch_returns_sentinel(lattice_1d):
    assert OUT_OF_DOMAIN == math.inf
    for x in range(-2, 6):
        for y in range(-2, 6):
            assert value2(lattice_1d, x, y) == OUT_OF_DOMAIN
    assert value3(lattice_1d, 0, 0, 0) == OUT_OF_DOMAIN
    assert value4(lattice_1d, 0, 0, 0, 0) == OUT_OF_DOMAIN
    assert lattice_1d.value(0, 0) == OUT_OF_DOMAIN


def test_out_of_range_returns_sentinel(lattice_1d, random_lattice):
    assert value1(lattice_1d, 3) == 0.7
    assert value1(lattice_1d, 4) == OUT_OF_DOMAIN
    assert value1(lattice_1d, -1) == OUT_OF_DOMAIN

    lattice = random_lattice(2, 4)
    assert value2(lattice, 4, 0) == OUT_OF_DOMAIN
    assert value2(lattice, 0, 4) == OUT_OF_DOMAIN
    assert value1(lattice, 0) == OUT_OF_DOMAIN


def test_seed_recorded_and_reproducible():
    a = build(2, 8, NumpyRandomSource(42))
    b = build(2, 8, NumpyRandomSource(42))
    c = build(2, 8, NumpyRandomSource(43))
    assert a.seed == 42
    np.testing.assert_array_equal(a.values, b.values)
    assert not np.array_equal(a.values, c.values)


def test_default_source_is_time_seeded():
    lattice = build(1, 16)
    assert isinstance(lattice.seed, int)
    rebuilt = build(1, 16, NumpyRandomSource(lattice.seed))
    np.testing.assert_array_equal(lattice.values, rebuilt.values)


def test_lattice_is_read_only(random_lattice):
    lattice = random_lattice(1, 8)
    with pytest.raises(ValueError):
        lattice.values[0] = 0.5
    with pytest.raises(AttributeError):
        lattice.dim_length = 3


def test_nan_coordinate_returns_sentinel(lattice_1d, random_lattice):
    assert value1(lattice_1d, math.nan) == OUT_OF_DOMAIN
    lattice = random_lattice(2, 4)
    assert value2(lattice, 1, math.nan) == OUT_OF_DOMAIN
    assert lattice.value(math.nan, 0) == OUT_OF_DOMAIN
