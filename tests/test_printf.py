import pytest

from skyness.printf import RED, RESET, printf, render


def test_null_string():
    assert render("%s", None) == "(null)"


@pytest.mark.parametrize("value", [None, 0])
def test_nil_pointer(value):
    assert render("%p", value) == "(nil)"


def test_int_min():
    assert render("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483647, 2147483647])
@pytest.mark.parametrize("spec", ["d", "i"])
def test_decimal_round_trip(spec, value):
    assert int(render(f"%{spec}", value)) == value


def test_decimal_wraps_to_32_bits():
    assert render("%d", 2**32 + 5) == render("%d", 5)


def test_unsigned_of_negative():
    assert int(render("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 0xDEADBEEF])
def test_hex_round_trip(value):
    lower = render("%x", value)
    assert int(lower, 16) == value
    assert render("%X", value) == lower.upper()


def test_pointer_hex():
    text = render("%p", 255)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 255


def test_string_and_char():
    assert render("<%s|%c>", "word", ord("z")) == "<word|z>"
    assert render("%c", "q") == "q"


def test_percent_and_colors():
    assert render("%%") == "%"
    assert render("%Rtext%r") == RED + "text" + RESET


def test_unknown_conversion_consumes_nothing():
    assert render("%q%d", 7) == render("%d", 7)


def test_trailing_percent_dropped():
    assert render("ab%") == "ab"


def test_missing_argument():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d%G!%r", "n", -3)
    out = capsys.readouterr().out
    assert out == render("%s=%d%G!%r", "n", -3)
    assert count == len(out)