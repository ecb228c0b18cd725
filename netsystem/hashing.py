"""Hash codes and string forms of plain values, and null-terminated lengths."""

import math
import struct
from itertools import takewhile

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_INT64_MIN = -(1 << 63)
_UINT64_MAX = (1 << 64) - 1
_LOW32 = 0xFFFFFFFF


def _to_int32(value):
    """Wrap an integer to a signed 32-bit value."""
    value &= _LOW32
    return value - (1 << 32) if value > _INT32_MAX else value


def _fold64(value):
    """Exclusive-or the low and high 32-bit halves of a 64-bit value."""
    return _to_int32((value & _LOW32) ^ ((value >> 32) & _LOW32))


def pointer_to_hash_code(address):
    """Return the hash code of a 64-bit address: its two halves exclusive-ored."""
    if isinstance(address, bool) or not isinstance(address, int):
        raise TypeError(f"address must be an integer, got {type(address).__name__}")
    if not 0 <= address <= _UINT64_MAX:
        raise ValueError(f"address out of range: {address}")
    return _fold64(address)


def get_hash_code(value):
    """Return a signed 32-bit hash code for ``value``.

    Booleans hash to 0 or 1, a one-character string to its code unit,
    integers that fit in 32 bits to themselves and wider 64-bit integers
    to their folded halves. Floats hash by their IEEE bits; other objects
    use their own hash, wrapped to 32 bits.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        if _INT32_MIN <= value <= _INT32_MAX:
            return value
        if not _INT64_MIN <= value <= _UINT64_MAX:
            raise OverflowError(f"integer does not fit in 64 bits: {value}")
        return _fold64(value)
    if isinstance(value, float):
        (bits,) = struct.unpack("<Q", struct.pack("<d", value))
        return _fold64(bits)
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        return ord(value)
    if value is None:
        raise TypeError("None has no hash code")
    return _to_int32(hash(value))


def _float_to_string(value):
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_string(value):
    """Return the text form of ``value``; ``None`` gives ``"null"``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_to_string(value)
    return str(value)


def _is_terminator(unit):
    return unit == 0 or unit == "\0"


def _terminated_length(units):
    if units is None:
        return 0
    return sum(1 for _ in takewhile(lambda unit: not _is_terminator(unit), units))


def utf16_length(units):
    """Count UTF-16 code units before the first zero; ``None`` counts as empty."""
    return _terminated_length(units)


def utf32_length(units):
    """Count UTF-32 code units before the first zero; ``None`` counts as empty."""
    return _terminated_length(units)