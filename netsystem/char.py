"""A UTF-16 code unit value and classification of characters."""

from dataclasses import dataclass
from typing import ClassVar

from netsystem import char_unicode_info as _info
from netsystem.latin1 import code_unit, is_ascii, is_latin1, latin1_category
from netsystem.unicode_category import UnicodeCategory

_LETTERS = range(UnicodeCategory.UppercaseLetter, UnicodeCategory.OtherLetter + 1)
_SEPARATORS = range(UnicodeCategory.SpaceSeparator, UnicodeCategory.ParagraphSeparator + 1)
_PUNCTUATION = range(UnicodeCategory.ConnectorPunctuation, UnicodeCategory.OtherPunctuation + 1)
_NUMBERS = range(UnicodeCategory.DecimalDigitNumber, UnicodeCategory.OtherNumber + 1)
_SYMBOLS = range(UnicodeCategory.MathSymbol, UnicodeCategory.OtherSymbol + 1)


@dataclass(frozen=True, order=True)
class Char:
    """A single UTF-16 code unit, built from a one-character string or an integer."""

    MAX_VALUE: ClassVar[int] = 0xFFFF
    MIN_VALUE: ClassVar[int] = 0x0000
    UNICODE_PLANE00_END: ClassVar[int] = 0x00FFFF
    UNICODE_PLANE01_START: ClassVar[int] = 0x10000
    UNICODE_PLANE16_END: ClassVar[int] = 0x10FFFF

    value: int = 0

    def __post_init__(self):
        value = code_unit(self.value)
        if value > self.MAX_VALUE:
            raise ValueError(f"character value out of range: {value:#x}")
        object.__setattr__(self, "value", value)

    def compare_to(self, other):
        """Negative, zero or positive as this character sorts before, with or after ``other``."""
        other_value = other.value if isinstance(other, Char) else code_unit(other)
        return self.value - other_value

    def __hash__(self):
        return self.value | (self.value << 16)

    def __str__(self):
        return chr(self.value)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value


def _category(value):
    if value <= 0xFF:
        return latin1_category(value)
    return _info.get_unicode_category(value)


def parse(text):
    """Return the only character of ``text``; raise ``ValueError`` otherwise."""
    if len(text) != 1:
        raise ValueError("The string must only contain a single character.")
    return text[0]


def try_parse(text):
    """Return the only character of ``text``, or ``None`` if it has another length."""
    if text is None or len(text) != 1:
        return None
    return text[0]


def is_digit(c):
    """True for decimal digits."""
    value = code_unit(c)
    if is_latin1(value):
        return ord("0") <= value <= ord("9")
    return _category(value) == UnicodeCategory.DecimalDigitNumber


def is_letter(c):
    """True for letters of any case."""
    value = code_unit(c)
    if is_latin1(value):
        if is_ascii(value):
            return ord("a") <= (value | 0x20) <= ord("z")
        return latin1_category(value) in _LETTERS
    return _category(value) in _LETTERS


def is_white_space(c):
    """True for white space, including tab, line breaks, NEL and no-break space."""
    value = code_unit(c)
    if is_latin1(value):
        return value == 0x20 or 0x09 <= value <= 0x0D or value in (0xA0, 0x85)
    return _category(value) in _SEPARATORS


def is_upper(c):
    """True for uppercase letters."""
    value = code_unit(c)
    if is_ascii(value):
        return ord("A") <= value <= ord("Z")
    return _category(value) == UnicodeCategory.UppercaseLetter


def is_lower(c):
    """True for lowercase letters."""
    value = code_unit(c)
    if is_ascii(value):
        return ord("a") <= value <= ord("z")
    return _category(value) == UnicodeCategory.LowercaseLetter


def is_punctuation(c):
    """True for punctuation of any kind."""
    return _category(code_unit(c)) in _PUNCTUATION


def is_letter_or_digit(c):
    """True for letters and decimal digits."""
    category = _category(code_unit(c))
    return category in _LETTERS or category == UnicodeCategory.DecimalDigitNumber


def is_control(c):
    """True for control characters."""
    return _category(code_unit(c)) == UnicodeCategory.Control


def is_number(c):
    """True for decimal digits, letter numbers and other numbers."""
    value = code_unit(c)
    if is_ascii(value):
        return ord("0") <= value <= ord("9")
    return _category(value) in _NUMBERS


def is_separator(c):
    """True for space, line and paragraph separators."""
    value = code_unit(c)
    if is_latin1(value):
        return value in (0x20, 0xA0)
    return _category(value) in _SEPARATORS


def is_surrogate(c):
    """True for any UTF-16 surrogate code unit."""
    return _info.HIGH_SURROGATE_START <= code_unit(c) <= _info.LOW_SURROGATE_END


def is_symbol(c):
    """True for math, currency, modifier and other symbols."""
    return _category(code_unit(c)) in _SYMBOLS


def get_unicode_category(c):
    """Return the ``UnicodeCategory`` of a character."""
    return _category(code_unit(c))


def get_numeric_value(c):
    """Return the numeric value of a character, or -1.0 if it has none."""
    return _info.get_numeric_value(code_unit(c))


def is_high_surrogate(c):
    """True for code units from U+D800 to U+DBFF."""
    return _info.HIGH_SURROGATE_START <= code_unit(c) <= _info.HIGH_SURROGATE_END


def is_low_surrogate(c):
    """True for code units from U+DC00 to U+DFFF."""
    return _info.LOW_SURROGATE_START <= code_unit(c) <= _info.LOW_SURROGATE_END


def _offsets(high, low):
    return (
        code_unit(high) - _info.HIGH_SURROGATE_START,
        code_unit(low) - _info.LOW_SURROGATE_START,
    )


def is_surrogate_pair(high, low):
    """True if ``high`` is a high surrogate and ``low`` a low surrogate."""
    high_offset, low_offset = _offsets(high, low)
    return 0 <= high_offset <= _info.HIGH_SURROGATE_RANGE and 0 <= low_offset <= _info.HIGH_SURROGATE_RANGE


def convert_to_utf32(high, low):
    """Join a surrogate pair into its code point; raise ``ValueError`` for an invalid pair."""
    high_offset, low_offset = _offsets(high, low)
    if not 0 <= high_offset <= _info.HIGH_SURROGATE_RANGE:
        raise ValueError("high surrogate out of range")
    if not 0 <= low_offset <= _info.HIGH_SURROGATE_RANGE:
        raise ValueError("low surrogate out of range")
    return (high_offset << 10) + low_offset + _info.UNICODE_PLANE01_START