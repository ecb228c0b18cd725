"""Byte-order reversal of fixed-width integers and raw bit reinterpretation."""

import struct

_VALID_WIDTHS = (8, 16, 32, 64)

IS_LITTLE_ENDIAN = True

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def reverse_endianness(value, bits=32, signed=False):
    """Return ``value`` with the order of its bytes reversed.

    ``bits`` is the width of the integer type (8, 16, 32 or 64) and
    ``signed`` selects two's-complement interpretation. A value that does
    not fit the chosen type raises ``OverflowError``.
    """
    if bits not in _VALID_WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")
    size = bits // 8
    raw = value.to_bytes(size, "little", signed=signed)
    return int.from_bytes(raw, "big", signed=signed)


def int64_bits_to_double(value):
    """Reinterpret the bits of a signed 64-bit integer as an IEEE double."""
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise OverflowError(f"value does not fit in a signed 64-bit integer: {value}")
    return struct.unpack("<d", struct.pack("<q", value))[0]