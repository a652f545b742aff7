import random

import pytest

from minnowtcp.wrapping_integers import Wrap32

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


def test_low_adjacent_seqnos_compare():
    assert (Wrap32(3) != Wrap32(1)) is True
    assert (Wrap32(3) == Wrap32(1)) is False


def test_random_comparisons():
    rng = random.Random(1234)
    for _ in range(8192):
        n = rng.getrandbits(32)
        diff = rng.getrandbits(8)
        m = (n + diff) & UINT32_MAX
        assert (Wrap32(n) == Wrap32(m)) == (n == m)
        assert (Wrap32(n) != Wrap32(m)) == (n != m)


@pytest.mark.parametrize(
    "n, zero, expected",
    [
        (3 * (1 << 32), 0, 0),
        (3 * (1 << 32) + 17, 15, 32),
        (7 * (1 << 32) - 2, 15, 13),
    ],
)
def test_wrap(n, zero, expected):
    assert Wrap32.wrap(n, Wrap32(zero)) == Wrap32(expected)


@pytest.mark.parametrize(
    "raw, zero, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
        (0, 1, 1, UINT32_MAX),
    ],
)
def test_unwrap(raw, zero, checkpoint, expected):
    assert Wrap32(raw).unwrap(Wrap32(zero), checkpoint) == expected


@pytest.mark.parametrize("value", [0, 1])
def test_extra_small_values_any_low_checkpoint(value):
    zero = Wrap32(19)
    for checkpoint in range(0, 100000, 7):
        assert Wrap32.wrap(value, zero).unwrap(zero, checkpoint) == value


@pytest.mark.parametrize(
    "value, centre",
    [
        (UINT32_MAX - 1, UINT32_MAX),
        (UINT32_MAX, UINT32_MAX),
        (UINT32_MAX + 1, UINT32_MAX),
        (UINT32_MAX + 2, UINT32_MAX),
        (2 * UINT32_MAX - 1, 2 * UINT32_MAX),
        (2 * UINT32_MAX, 2 * UINT32_MAX),
        (2 * UINT32_MAX + 1, 2 * UINT32_MAX),
        (2 * UINT32_MAX + 2, 2 * UINT32_MAX),
    ],
)
def test_extra_values_near_wrap_points(value, centre):
    zero = Wrap32(19)
    for checkpoint in range(centre - 100000, centre + 100000, 13):
        assert Wrap32.wrap(value, zero).unwrap(zero, checkpoint) == value


@pytest.mark.parametrize("centre", [UINT32_MAX, 2 * UINT32_MAX])
def test_extra_values_around_fixed_checkpoint(centre):
    zero = Wrap32(19)
    for i in range(-100000, 100000, 11):
        assert Wrap32.wrap(centre + i, zero).unwrap(zero, centre) == centre + i


def test_roundtrip_random():
    rng = random.Random(20240101)
    big_offset = (1 << 31) - 1
    for _ in range(3000):
        isn = Wrap32(rng.randint(0, UINT32_MAX))
        val = rng.randint(big_offset, 1 << 63)
        offset = rng.randint(0, (1 << 31) - 1)
        for value in (
            val,
            val + 1,
            val - 1,
            val + offset,
            val - offset,
            val + big_offset,
            val - big_offset,
        ):
            assert Wrap32.wrap(value, isn).unwrap(isn, val) == value


def test_add_wraps_around():
    assert Wrap32(UINT32_MAX) + 1 == Wrap32(0)
    assert Wrap32(5) + 3 == Wrap32(8)


def test_equal_values_hash_equal():
    assert hash(Wrap32(42)) == hash(Wrap32.wrap(42, Wrap32(0)))
    assert len({Wrap32(7), Wrap32(7), Wrap32(8)}) == 2


def test_out_of_range_raw_value_rejected():
    with pytest.raises(ValueError):
        Wrap32(1 << 32)
    with pytest.raises(ValueError):
        Wrap32(-1)