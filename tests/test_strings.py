import pytest

from maakit.strings import (
    replace_all,
    replace_all_map,
    split,
    to_lower,
    to_upper,
    trim,
)


def test_replace_all_replaces_every_occurrence():
    assert replace_all("a.b.c", ".", "::") == "a::b::c"


def test_replace_all_does_not_rescan_inserted_text():
    result = replace_all("xax", "a", "aa")
    assert result.count("a") == 2
    assert result.startswith("x") and result.endswith("x")


def test_replace_all_without_match_is_identity():
    assert replace_all("hello", "z", "y") == "hello"


def test_replace_all_rejects_empty_pattern():
    with pytest.raises(ValueError):
        replace_all("abc", "", "x")


def test_replace_all_works_on_bytes():
    assert replace_all(b"a\\b\\c", b"\\", b"/") == b"a/b/c"


def test_replace_all_map_applies_pairs_in_order():
    assert replace_all_map("abc", {"a": "b", "b": "c"}) == "ccc"


def test_replace_all_map_accepts_pairs():
    assert replace_all_map("abc", [("b", "B"), ("c", "C")]) == "aBC"


def test_trim_strips_only_spaces():
    assert trim("  hi there  ") == "hi there"
    assert trim("\thi ") == "\thi"


def test_trim_all_spaces_gives_empty():
    assert trim("     ") == ""
    assert trim(b"  x  ") == b"x"


def test_case_folding_is_ascii_only():
    assert to_lower("ABC def") == "abc def"
    assert to_upper("abc DEF") == "ABC DEF"
    assert to_upper("\u00e9") == "\u00e9"
    assert to_lower("\u00c9") == "\u00c9"


def test_case_folding_round_trip_for_ascii():
    text = "Mixed Case 123"
    assert to_lower(to_upper(text)) == to_lower(text)


def test_case_folding_bytes():
    assert to_lower(b"ABC") == b"abc"
    assert to_upper(b"abc") == b"ABC"


def test_split_keeps_empty_pieces():
    assert split("a,b,,c", ",") == ["a", "b", "", "c"]


def test_split_trailing_delimiter():
    assert split("a,b,", ",")[-1] == ""


def test_split_empty_text_gives_nothing():
    assert split("", ",") == []


def test_split_multi_char_delimiter():
    assert split("a::b::c", "::") == ["a", "b", "c"]


def test_split_empty_delimiter_gives_characters():
    assert split("abc", "") == ["a", "b", "c"]
    assert split(b"ab", b"") == [b"a", b"b"]


@pytest.mark.parametrize("text", ["a", "a,b", ",x,", "no delimiter"])
def test_split_join_round_trip(text):
    assert ",".join(split(text, ",")) == text