import pytest

from minitalk.printf import printf, render


def test_plain_text_is_unchanged():
    assert render("hello world") == "hello world"


def test_percent_escape():
    assert render("100%%") == "100%"


def test_decimal_conversions():
    assert render("%d and %i", 42, -7) == "42 and -7"


def test_decimal_wraps_to_32_bits():
    assert render("%d", 2**31) == "-2147483648"
    assert render("%d", -2147483648) == "-2147483648"


def test_char_from_int_and_str():
    assert render("%c%c", ord("A"), "b") == "Ab"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        render("%c", "ab")


def test_null_string():
    assert render("%s", None) == "(null)"


def test_string_conversion():
    assert render("[%s]", "abc") == "[abc]"


def test_unsigned_of_negative_wraps():
    assert int(render("%u", -1)) == 2**32 - 1


def test_hex_of_negative():
    assert render("%x", -10) == "fffffff6"


@pytest.mark.parametrize("value", [0, 1, 15, 255, 4096, 2**32 - 1])
def test_hex_round_trip(value):
    assert int(render("%x", value), 16) == value
    assert int(render("%X", value), 16) == value
    assert render("%X", value) == render("%x", value).upper()


def test_null_pointer():
    assert render("%p", None) == "0x0"


def test_pointer_round_trip():
    text = render("%p", 0xDEAD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEAD


def test_unknown_conversion_is_dropped_without_consuming():
    assert render("a%qb%d", 5) == "ab5"


def test_trailing_percent_is_ignored():
    assert render("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("Server PID: %d\n", 99)
    out = capsys.readouterr().out
    assert out == "Server PID: 99\n"
    assert count == len(out)