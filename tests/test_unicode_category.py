import pytest

from netsystem.unicode_category import UnicodeCategory


def test_members_are_contiguous_from_zero():
    members = [UnicodeCategory(value) for value in range(30)]
    assert [member.value for member in members] == list(range(30))
    assert len(set(members)) == 30


def test_lookup_by_value_round_trips():
    for member in UnicodeCategory:
        assert UnicodeCategory(member.value) is member
        assert UnicodeCategory[member.name] is member


def test_documented_values():
    assert UnicodeCategory(8) is UnicodeCategory.DecimalDigitNumber
    assert UnicodeCategory["Control"] == 14
    assert UnicodeCategory(29) is UnicodeCategory.OtherNotAssigned


def test_letter_group_ordering():
    letters = [UnicodeCategory(value) for value in range(5)]
    assert [m.name for m in letters] == [
        "UppercaseLetter",
        "LowercaseLetter",
        "TitlecaseLetter",
        "ModifierLetter",
        "OtherLetter",
    ]
    assert UnicodeCategory(0) < UnicodeCategory(4) < UnicodeCategory(5)


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        UnicodeCategory(len(UnicodeCategory))