"""Unicode categories of the ASCII and Latin-1 Supplement characters."""

from netsystem.unicode_category import UnicodeCategory

_ABBREVIATIONS = {
    "Lu": UnicodeCategory.UppercaseLetter,
    "Ll": UnicodeCategory.LowercaseLetter,
    "Nd": UnicodeCategory.DecimalDigitNumber,
    "No": UnicodeCategory.OtherNumber,
    "Zs": UnicodeCategory.SpaceSeparator,
    "Cc": UnicodeCategory.Control,
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
}

# One row per sixteen characters, U+0000 to U+00FF.
_ROWS = (
    "Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc",
    "Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc",
    "Zs Po Po Po Sc Po Po Po Ps Pe Po Sm Po Pd Po Po",
    "Nd Nd Nd Nd Nd Nd Nd Nd Nd Nd Po Po Sm Sm Sm Po",
    "Po Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu",
    "Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Ps Po Pe Sk Pc",
    "Sk Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll",
    "Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ps Sm Pe Sm Cc",
    "Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc",
    "Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc Cc",
    "Zs Po Sc Sc Sc Sc So So Sk So Ll Pi Sm Pd So Sk",
    "So Sm No No Sk Ll So Po Sk No Ll Pf No No No Po",
    "Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu Lu",
    "Lu Lu Lu Lu Lu Lu Lu Sm Lu Lu Lu Lu Lu Lu Lu Ll",
    "Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll Ll",
    "Ll Ll Ll Ll Ll Ll Ll Sm Ll Ll Ll Ll Ll Ll Ll Ll",
)

_CATEGORY_FOR_LATIN1 = tuple(
    _ABBREVIATIONS[name] for row in _ROWS for name in row.split()
)

LATIN1_SIZE = len(_CATEGORY_FOR_LATIN1)


def code_unit(c):
    """Return the integer value of a one-character string or a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        if c < 0:
            raise ValueError(f"character value must not be negative: {c}")
        return c
    raise TypeError(f"expected a character or a code point, got {type(c).__name__}")


def is_latin1(c):
    """True for characters up to U+00FF (ASCII and Latin-1 Supplement)."""
    return code_unit(c) <= 0x00FF


def is_ascii(c):
    """True for characters up to U+007F."""
    return code_unit(c) <= 0x007F


def latin1_category(c):
    """Return the ``UnicodeCategory`` of a character up to U+00FF."""
    value = code_unit(c)
    if value >= LATIN1_SIZE:
        raise ValueError("Invalid index into Latin1 unicode category.")
    return _CATEGORY_FOR_LATIN1[value]