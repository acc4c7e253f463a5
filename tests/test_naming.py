import pytest

from photopool.domain.errors import InvalidInput
from photopool.domain.naming import (
    MAX_NAME_BYTES,
    candidate_names,
    check_pool_name,
    secure_name,
    stem_budget,
    truncate_utf8,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("cat.jpg", "cat.jpg"),
        ("my holiday.png", "my_holiday.png"),
        ("../../etc/passwd", "passwd"),
        ("C:\\photos\\dog.gif", "dog.gif"),
        ("we$ird*name.jpeg", "weirdname.jpeg"),
        (".hidden.jpg", "hidden.jpg"),
    ],
)
def test_secure_name(raw, expected):
    assert secure_name(raw) == expected


@pytest.mark.parametrize("bad", ["", ".env", "..", "a/b.jpg", "a\\b.jpg", "x\x00.jpg"])
def test_check_pool_name_rejects_unsafe_names(bad):
    with pytest.raises(InvalidInput):
        check_pool_name(bad)


def test_check_pool_name_passes_plain_names():
    assert check_pool_name("1700000000000-cat.jpg") == "1700000000000-cat.jpg"


def test_candidate_names_suffix_before_extension():
    assert list(candidate_names("123-cat.jpg", 2)) == ["123-cat.jpg", "123-cat-1.jpg", "123-cat-2.jpg"]


def test_candidate_names_zero_budget_yields_hint_only():
    assert list(candidate_names("a.png", 0)) == ["a.png"]


def test_truncate_utf8_never_splits_a_character():
    text = "写真" * 10  # 3 bytes per character

    cut = truncate_utf8(text, 10)

    assert cut == "写真写"
    assert len(cut.encode("utf-8")) <= 10
    assert truncate_utf8("abc", 0) == ""
    assert truncate_utf8("abc", 10) == "abc"


def test_stem_budget_leaves_room_for_suffixes():
    budget = stem_budget("1700000000000-", ".jpeg", 5)
    longest = f"1700000000000-{'x' * budget}-5.jpeg.json"

    assert len(longest.encode("utf-8")) == MAX_NAME_BYTES
