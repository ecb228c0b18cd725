"""Unicode category and numeric value lookups for characters and strings."""

import unicodedata

from netsystem.unicode_category import UnicodeCategory

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
HIGH_SURROGATE_RANGE = 0x3FF
UNICODE_PLANE01_START = 0x10000
MAX_CODE_POINT = 0x10FFFF

# Numeric values are only known for code points below this limit.
_NUMERIC_LIMIT = 761 << 8

_BY_ABBREVIATION = {
    "Lu": UnicodeCategory.UppercaseLetter,
    "Ll": UnicodeCategory.LowercaseLetter,
    "Lt": UnicodeCategory.TitlecaseLetter,
    "Lm": UnicodeCategory.ModifierLetter,
    "Lo": UnicodeCategory.OtherLetter,
    "Mn": UnicodeCategory.NonSpacingMark,
    "Mc": UnicodeCategory.SpacingCombiningMark,
    "Me": UnicodeCategory.EnclosingMark,
    "Nd": UnicodeCategory.DecimalDigitNumber,
    "Nl": UnicodeCategory.LetterNumber,
    "No": UnicodeCategory.OtherNumber,
    "Zs": UnicodeCategory.SpaceSeparator,
    "Zl": UnicodeCategory.LineSeparator,
    "Zp": UnicodeCategory.ParagraphSeparator,
    "Cc": UnicodeCategory.Control,
    "Cf": UnicodeCategory.Format,
    "Cs": UnicodeCategory.Surrogate,
    "Co": UnicodeCategory.PrivateUse,
    "Pc": UnicodeCategory.ConnectorPunctuation,
    "Pd": UnicodeCategory.DashPunctuation,
    "Ps": UnicodeCategory.OpenPunctuation,
    "Pe": UnicodeCategory.ClosePunctuation,
    "Pi": UnicodeCategory.InitialQuotePunctuation,
    "Pf": UnicodeCategory.FinalQuotePunctuation,
    "Po": UnicodeCategory.OtherPunctuation,
    "Sm": UnicodeCategory.MathSymbol,
    "Sc": UnicodeCategory.CurrencySymbol,
    "Sk": UnicodeCategory.ModifierSymbol,
    "So": UnicodeCategory.OtherSymbol,
    "Cn": UnicodeCategory.OtherNotAssigned,
}


def _code_point_at(text, index):
    """Code point at ``index``, joining a surrogate pair without validating it."""
    if index < len(text) - 1:
        high = ord(text[index]) - HIGH_SURROGATE_START
        if 0 <= high <= HIGH_SURROGATE_RANGE:
            low = ord(text[index + 1]) - LOW_SURROGATE_START
            if 0 <= low <= HIGH_SURROGATE_RANGE:
                return high * 0x400 + low + UNICODE_PLANE01_START
    return ord(text[index])


def _resolve(value, index):
    if isinstance(value, str):
        if index is None:
            if len(value) != 1:
                raise ValueError("expected a single character")
            return ord(value)
        if not 0 <= index < len(value):
            raise IndexError(f"index {index} out of range for string of length {len(value)}")
        return _code_point_at(value, index)
    if isinstance(value, int) and not isinstance(value, bool):
        if index is not None:
            raise TypeError("an index applies only to strings")
        if not 0 <= value <= MAX_CODE_POINT:
            raise ValueError(f"code point out of range: {value:#x}")
        return value
    raise TypeError(f"expected a string or a code point, got {type(value).__name__}")


def get_unicode_category(value, index=None):
    """Return the ``UnicodeCategory`` of a character, code point or string position.

    With a string and an index, a surrogate pair starting at the index is
    treated as one code point; a lone surrogate reports ``Surrogate``.
    """
    code_point = _resolve(value, index)
    return _BY_ABBREVIATION[unicodedata.category(chr(code_point))]


def get_numeric_value(value, index=None):
    """Return the numeric value of a character, code point or string position, or -1.0."""
    code_point = _resolve(value, index)
    if code_point >= _NUMERIC_LIMIT:
        return -1.0
    return float(unicodedata.numeric(chr(code_point), -1.0))