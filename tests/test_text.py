import pytest

from skyness.text import split_words, str_find, str_find_unquoted


@pytest.mark.parametrize(
    "text, find",
    [("hello world", "world"), ("abcabc", "ca"), ("xx/*yy*/", "*/"), ("aaa", "a")],
)
def test_str_find_locates_first_occurrence(text, find):
    pos = str_find(text, find, len(text))
    assert text[pos : pos + len(find)] == find
    assert find not in text[: pos + len(find) - 1]


def test_str_find_missing_returns_minus_one():
    assert str_find("hello", "xyz", 5) == -1


def test_str_find_respects_limit():
    assert str_find("hello world", "world", 4) == -1


def test_str_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        str_find("abc", "", 3)


def test_unquoted_skips_quoted_match():
    text = 'a "/*" b /* c'
    pos = str_find_unquoted(text, "/*", len(text))
    assert pos == text.rindex("/*")
    assert str_find("a" + text[1:], "/*", len(text)) < pos


def test_unquoted_finds_unquoted_match_like_plain_search():
    text = "no quotes // here"
    assert str_find_unquoted(text, "//", len(text)) == str_find(text, "//", len(text))


def test_unquoted_everything_quoted():
    text = '"// inside"'
    assert str_find_unquoted(text, "//", len(text)) == -1


def test_unquoted_limit():
    assert str_find_unquoted("abc //", "//", 1) == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t \t") == []


def test_split_words_keeps_other_whitespace():
    assert split_words("a\nb c") == ["a\nb", "c"]


@pytest.mark.parametrize("text", ["16 16 4 1", "\t x  y\tz\t", "single", " 1  2 "])
def test_split_words_round_trip(text):
    words = split_words(text)
    assert " ".join(words) == " ".join(text.split())
    assert all(" " not in w and "\t" not in w and w for w in words)