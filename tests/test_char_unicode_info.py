import pytest
from hypothesis import given, strategies as st

from netsystem.char_unicode_info import (
    HIGH_SURROGATE_START,
    LOW_SURROGATE_START,
    UNICODE_PLANE01_START,
    get_numeric_value,
    get_unicode_category,
)
from netsystem.unicode_category import UnicodeCategory

PAIR = chr(HIGH_SURROGATE_START) + chr(LOW_SURROGATE_START)


def test_ascii_categories():
    assert get_unicode_category("A") is UnicodeCategory.UppercaseLetter
    assert get_unicode_category("a") is UnicodeCategory.LowercaseLetter
    assert get_unicode_category("7") is UnicodeCategory.DecimalDigitNumber
    assert get_unicode_category(" ") is UnicodeCategory.SpaceSeparator
    assert get_unicode_category("\t") is UnicodeCategory.Control


def test_surrogate_pair_in_string_is_joined():
    joined = get_unicode_category(PAIR, 0)
    assert joined is get_unicode_category(UNICODE_PLANE01_START)
    assert get_unicode_category(PAIR, 1) is UnicodeCategory.Surrogate


def test_lone_high_surrogate_at_end():
    text = "x" + chr(HIGH_SURROGATE_START)
    assert get_unicode_category(text, 1) is UnicodeCategory.Surrogate


@given(st.characters(max_codepoint=0xFFFF, blacklist_categories=("Cs",)))
def test_char_codepoint_and_string_forms_agree(ch):
    category = get_unicode_category(ch)
    assert get_unicode_category(ord(ch)) is category
    assert get_unicode_category("x" + ch + "y", 1) is category


@given(st.text(min_size=1), st.data())
def test_string_index_gives_a_category(text, data):
    index = data.draw(st.integers(min_value=0, max_value=len(text) - 1))
    assert get_unicode_category(text, index) in set(UnicodeCategory)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        get_unicode_category("abc", 3)
    with pytest.raises(IndexError):
        get_numeric_value("abc", -1)


def test_bad_arguments():
    with pytest.raises(ValueError):
        get_unicode_category("ab")
    with pytest.raises(ValueError):
        get_unicode_category(0x110000)
    with pytest.raises(TypeError):
        get_unicode_category(65, 0)


def test_numeric_values():
    assert get_numeric_value("5") == 5.0
    assert get_numeric_value("a") == -1
    assert get_numeric_value("\u00bd") == 0.5
    assert get_numeric_value("a5", 1) == get_numeric_value("5")


@given(st.sampled_from("0123456789"))
def test_digits_have_their_own_value(digit):
    assert get_numeric_value(digit) == float(int(digit))
    assert get_unicode_category(digit) is UnicodeCategory.DecimalDigitNumber


def test_numeric_value_beyond_table_is_negative_one():
    assert get_numeric_value(0x10FFFF) == -1