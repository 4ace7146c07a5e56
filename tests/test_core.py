import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wiringkit import core

ints = st.integers(min_value=-(2**40), max_value=2**40)
indexes = st.integers(min_value=0, max_value=31)
words = st.integers(min_value=0, max_value=0xFFFF)
bytes_ = st.integers(min_value=0, max_value=0xFF)


def test_enum_lookup_by_header_value():
    assert core.BitOrder(0) is core.BitOrder.LSBFIRST
    assert core.BitOrder(1) is core.BitOrder.MSBFIRST
    assert sorted(core.PinMode(v).value for v in (0x2, 0x0, 0x1)) == [0x0, 0x1, 0x2]
    with pytest.raises(ValueError):
        core.BitOrder(2)


def test_angle_conversions_agree_with_constants():
    assert core.degrees(core.PI) == pytest.approx(180.0)
    assert core.radians(360) == pytest.approx(core.TWO_PI)
    assert core.radians(core.RAD_TO_DEG) == pytest.approx(1.0)
    assert core.degrees(core.DEG_TO_RAD) == pytest.approx(1.0)
    assert core.PI == pytest.approx(math.pi)


@given(ints, ints, ints)
def test_constrain_stays_in_range(amt, a, b):
    low, high = min(a, b), max(a, b)
    result = core.constrain(amt, low, high)
    assert low <= result <= high
    if low <= amt <= high:
        assert result == amt


@given(st.floats(min_value=-1e9, max_value=1e9, allow_nan=False))
def test_round_half_away_is_near_and_symmetric(x):
    r = core.round_half_away(x)
    assert abs(r - x) <= 0.5
    if x != 0:
        assert core.round_half_away(-x) == -r


@pytest.mark.parametrize("x", [0.5, 1.5, 2.5, -0.5, -1.5])
def test_round_half_away_halves_go_outwards(x):
    r = core.round_half_away(x)
    assert abs(r) > abs(x)


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_radians_degrees_round_trip(x):
    assert core.degrees(core.radians(x)) == pytest.approx(x, rel=1e-12, abs=1e-9)


def test_radians_of_half_turn_is_pi():
    assert core.radians(180) == pytest.approx(core.PI)


@given(ints)
def test_sq(x):
    assert core.sq(x) == x * x


@given(indexes)
def test_bit_reads_back(b):
    assert core.bit_read(core.bit(b), b) == 1
    assert bin(core.bit(b)).count("1") == 1


@given(st.integers(min_value=0, max_value=2**32 - 1), indexes)
def test_set_clear_toggle(value, b):
    assert core.bit_read(core.bit_set(value, b), b) == 1
    assert core.bit_read(core.bit_clear(value, b), b) == 0
    assert core.bit_toggle(core.bit_toggle(value, b), b) == value
    assert core.bit_read(core.bit_toggle(value, b), b) == 1 - core.bit_read(value, b)


@given(st.integers(min_value=0, max_value=2**32 - 1), indexes, st.booleans())
def test_bit_write(value, b, flag):
    result = core.bit_write(value, b, flag)
    assert core.bit_read(result, b) == int(flag)
    assert core.bit_clear(result, b) == core.bit_clear(value, b)


def test_negative_bit_index_rejected():
    with pytest.raises(ValueError):
        core.bit_set(0, -1)


@given(words)
def test_byte_split_and_join_round_trip(w):
    assert core.make_word(core.high_byte(w), core.low_byte(w)) == w
    assert 0 <= core.low_byte(w) <= 0xFF
    assert 0 <= core.high_byte(w) <= 0xFF


@given(bytes_, bytes_)
def test_make_word_parts(h, lo):
    w = core.make_word(h, lo)
    assert core.high_byte(w) == h
    assert core.low_byte(w) == lo


@given(words)
def test_make_word_single_argument(w):
    assert core.make_word(w) == w


@pytest.mark.parametrize(
    "name, value",
    [("B0", 0), ("B1010", 10), ("B00001010", 10), ("B11111111", 255), ("B1111111", 127)],
)
def test_binary_value_matches_header(name, value):
    assert core.binary_value(name) == value


@given(st.integers(min_value=0, max_value=255))
def test_binary_value_round_trip(n):
    assert core.binary_value("B" + format(n, "b")) == n
    assert core.binary_value("B" + format(n, "08b")) == n


@pytest.mark.parametrize("name", ["B", "B2", "B111111111", "b101", "101", "B10 "])
def test_binary_value_rejects_bad_names(name):
    with pytest.raises(ValueError):
        core.binary_value(name)