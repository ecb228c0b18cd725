import pytest
from hypothesis import given, strategies as st

from netsystem.byte import Byte

byte_values = st.integers(min_value=0, max_value=255)


def test_default_is_zero():
    assert Byte() == Byte(0)
    assert int(Byte()) == 0


def test_equality():
    assert Byte(7) == Byte(7)
    assert not Byte(7) == Byte(8)


@given(byte_values)
def test_hash_is_value(value):
    assert hash(Byte(value)) == value


@given(byte_values)
def test_int_round_trip(value):
    assert int(Byte(value)) == value


@given(byte_values, byte_values)
def test_compare_to_antisymmetric(a, b):
    assert Byte(a).compare_to(Byte(b)) == -Byte(b).compare_to(Byte(a))


@given(byte_values, byte_values)
def test_compare_to_matches_ordering(a, b):
    result = Byte(a).compare_to(Byte(b))
    assert (result < 0) == (Byte(a) < Byte(b))
    assert (result == 0) == (Byte(a) == Byte(b))


def test_compare_to_extremes():
    assert Byte(255).compare_to(Byte(0)) == 255
    assert Byte(0).compare_to(Byte(255)) == -255


def test_sorting():
    values = [Byte(v) for v in (200, 3, 77)]
    assert [int(b) for b in sorted(values)] == [3, 77, 200]


def test_usable_as_set_member():
    assert len({Byte(5), Byte(5), Byte(6)}) == 2


def test_out_of_range():
    with pytest.raises(ValueError):
        Byte(256)
    with pytest.raises(ValueError):
        Byte(-1)


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        Byte(1.0)
    with pytest.raises(TypeError):
        Byte(True)