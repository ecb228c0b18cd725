"""Flags that say which style elements a numeric string may contain."""

from enum import IntFlag


class NumberStyles(IntFlag):
    """Style elements permitted in numeric strings given to parse functions.

    The single-bit members may be combined freely; the composite members
    are the combinations in common use.
    """

    None_ = 0
    AllowLeadingWhite = 1
    AllowTrailingWhite = 2
    AllowLeadingSign = 4
    Integer = 7
    AllowTrailingSign = 8
    AllowParentheses = 16
    AllowDecimalPoint = 32
    AllowThousands = 64
    Number = 111
    AllowExponent = 128
    Float = 167
    AllowCurrencySymbol = 256
    Currency = 383
    Any = 511
    AllowHexSpecifier = 512
    HexNumber = 515