import math
import struct

import pytest
from hypothesis import given, strategies as st

from netsystem.binary_primitives import int64_bits_to_double, reverse_endianness


def test_reverse_32_bit_unsigned():
    assert reverse_endianness(0x12345678, 32) == 0x78563412


def test_eight_bit_is_identity():
    assert reverse_endianness(0xAB, 8) == 0xAB
    assert reverse_endianness(-5, 8, signed=True) == -5


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
@given(data=st.data())
def test_unsigned_round_trip(bits, data):
    value = data.draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    once = reverse_endianness(value, bits)
    assert 0 <= once < (1 << bits)
    assert reverse_endianness(once, bits) == value


@pytest.mark.parametrize("bits", [16, 32, 64])
@given(data=st.data())
def test_signed_round_trip(bits, data):
    limit = 1 << (bits - 1)
    value = data.draw(st.integers(min_value=-limit, max_value=limit - 1))
    once = reverse_endianness(value, bits, signed=True)
    assert -limit <= once < limit
    assert reverse_endianness(once, bits, signed=True) == value


@given(st.integers(min_value=0, max_value=(1 << 64) - 1))
def test_64_bit_matches_byte_reversal(value):
    reversed_value = reverse_endianness(value, 64)
    assert reversed_value.to_bytes(8, "big") == value.to_bytes(8, "little")


def test_unsupported_width_rejected():
    with pytest.raises(ValueError):
        reverse_endianness(1, 24)


def test_out_of_range_value_rejected():
    with pytest.raises(OverflowError):
        reverse_endianness(0x1_0000, 16)
    with pytest.raises(OverflowError):
        reverse_endianness(-1, 32)


def test_int64_bits_to_double_known_values():
    assert int64_bits_to_double(0x3FF0000000000000) == 1.0
    assert int64_bits_to_double(0) == 0.0


@given(st.floats(allow_nan=False))
def test_int64_bits_to_double_round_trip(number):
    (bits,) = struct.unpack("<q", struct.pack("<d", number))
    assert int64_bits_to_double(bits) == number


def test_int64_bits_to_double_nan():
    nan_bytes = struct.pack("<d", math.nan)
    (bits,) = struct.unpack("<q", nan_bytes)
    result = int64_bits_to_double(bits)
    assert math.isnan(result)
    assert struct.pack("<d", result) == nan_bytes


def test_int64_bits_to_double_range():
    with pytest.raises(OverflowError):
        int64_bits_to_double(1 << 63)