import pytest

from skyness.colors import NONE_COLOR, lookup_color, text_rgb


def test_lookup_pins_table_values():
    assert lookup_color("snow") == 0xFFFAFA
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("navy") == 0x80


def test_lookup_is_case_insensitive():
    assert lookup_color("GhostWhite") == lookup_color("ghostwhite")
    assert lookup_color("RED") == lookup_color("red")


def test_duplicate_name_takes_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899


def test_none_is_transparent():
    assert lookup_color("none") == NONE_COLOR
    assert text_rgb("None") == -1


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not-a-colour")


@pytest.mark.parametrize("n", [0, 1, 17, 50, 99, 100])
def test_gray_and_grey_agree(n):
    assert lookup_color(f"gray{n}") == lookup_color(f"grey{n}")


def test_numbered_variant_one_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")


def test_text_rgb_hex():
    assert text_rgb("#ff0000") == 0xFF0000
    assert text_rgb("#00ff00", "ignored") == 0xFF00


def test_text_rgb_hex_without_digits_is_zero():
    assert text_rgb("#zz") == 0
    assert text_rgb("#") == 0


def test_text_rgb_joins_two_words():
    assert text_rgb("light", "blue") == lookup_color("light blue")
    assert text_rgb("Light", "Blue") == lookup_color("lightblue")


def test_text_rgb_single_word_matches_lookup():
    assert text_rgb("Chocolate") == lookup_color("chocolate")


def test_text_rgb_unknown_is_zero():
    assert text_rgb("nosuchcolour") == 0
    assert text_rgb("nosuch", "colour") == 0


def test_text_rgb_truncates_long_joined_name():
    long_name = "x" * 70
    assert text_rgb(long_name, "red") == 0
    assert text_rgb("red" + " " * 0, None) == lookup_color("red")