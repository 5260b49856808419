import io

import pytest

from libft.convert import itoa, ultoa_base
from libft.printf import HEX_DIGITS, printf, sprintf


def test_string_conversion():
    assert sprintf("%s", "hello") == "hello"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_string_stops_at_terminator():
    assert sprintf("%s", "ab\0cd") == "ab"


def test_format_stops_at_terminator():
    assert sprintf("abc\0%d", 1) == "abc"


@pytest.mark.parametrize("value", [0, 100, -100, 2147483647, -2147483648])
def test_decimal_matches_itoa(value):
    assert sprintf("%d", value) == itoa(value)
    assert sprintf("%i", value) == itoa(value)


def test_decimal_limits():
    assert sprintf("%d", 2147483647) == "2147483647"
    assert sprintf("%i", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert sprintf("%d", 1 << 31) == "-2147483648"


def test_unsigned_of_negative_one():
    assert sprintf("%u", -1) == str(0xFFFFFFFF)


def test_lower_hex():
    assert sprintf("%x", 2147483647) == "7fffffff"
    assert sprintf("%x", -1) == "ffffffff"


@pytest.mark.parametrize("value", [0, 31, 2147483647, -1, -2147483648])
def test_upper_hex_is_lower_hex_upper_cased(value):
    assert sprintf("%X", value) == sprintf("%x", value).upper()


def test_pointer_null_and_zero():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_prefix_and_digits():
    result = sprintf("%p", 4096)
    assert result.startswith("0x")
    assert result[2:] == ultoa_base(HEX_DIGITS, 4096)


def test_pointer_of_object_uses_identity():
    item = object()
    assert sprintf("%p", item) == "0x" + ultoa_base(HEX_DIGITS, id(item))


def test_character_from_text_and_code():
    assert sprintf("%c", "A") == "A"
    assert sprintf("%c", ord("z")) == "z"


def test_percent_literal():
    assert sprintf("%%") == "%"


def test_unknown_conversion_is_written_back():
    assert sprintf("%q") == "%q"


def test_mixed_text_and_conversions():
    assert sprintf("a%sb%dc", "X", 5) == "a" + "X" + "b" + itoa(5) + "c"


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        sprintf("50%")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_none_format_raises():
    with pytest.raises(TypeError):
        sprintf(None)


def test_non_integer_for_decimal_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "5")


def test_non_text_for_string_raises():
    with pytest.raises(TypeError):
        sprintf("%s", 5)


def test_printf_writes_to_file_and_counts():
    buf = io.StringIO()
    count = printf("x%dy%s", 7, "z", file=buf)
    assert buf.getvalue() == sprintf("x%dy%s", 7, "z")
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s!", None)
    out = capsys.readouterr().out
    assert out == "(null)!"
    assert count == len(out)