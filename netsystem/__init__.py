"""Character classification, Unicode categories, fixed-length arrays, byte-order and hashing helpers."""

__version__ = "0.1.0"