import io

import pytest

from pipex.output import (
    format_printf,
    print_formatted,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


@pytest.fixture
def out():
    return io.StringIO()


def test_put_char_with_string(out):
    put_char("a", out)
    assert out.getvalue() == "a"


def test_put_char_with_int(out):
    put_char(ord("z"), out)
    assert out.getvalue() == "z"


def test_put_char_rejects_long_string(out):
    with pytest.raises(ValueError):
        put_char("ab", out)


def test_put_str_writes_text(out):
    put_str("Hello world", out)
    assert out.getvalue() == "Hello world"


def test_put_str_none_writes_nothing(out):
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_str_defaults_to_stdout(capsys):
    put_str("Hello")
    assert capsys.readouterr().out == "Hello"


def test_put_endl_appends_newline(out):
    put_endl("Hello", out)
    assert out.getvalue() == "Hello\n"


def test_put_endl_none_writes_nothing(out):
    put_endl(None, out)
    assert out.getvalue() == ""


def test_put_nbr_source_example(out):
    put_nbr(12345, out)
    assert out.getvalue() == "12345"


def test_put_nbr_int_min(out):
    put_nbr(INT_MIN, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("value", [0, 7, -7, INT_MAX, INT_MIN])
def test_put_nbr_round_trip(out, value):
    put_nbr(value, out)
    assert int(out.getvalue()) == value


def test_put_nbr_out_of_range(out):
    with pytest.raises(OverflowError):
        put_nbr(INT_MAX + 1, out)


def test_percent_literal():
    assert format_printf("%%") == "%"


def test_string_conversion():
    assert format_printf("hello %s", "world") == "hello " + "world"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_empty_string():
    assert format_printf("%s", "") == ""


def test_string_conversion_rejects_non_str():
    with pytest.raises(TypeError):
        format_printf("%s", 3)


def test_char_conversion():
    assert format_printf("%c", ord("A")) == "A"
    assert format_printf("%c", "q") == "q"


@pytest.mark.parametrize("spec", ["d", "i"])
@pytest.mark.parametrize("value", [0, 42, -42, INT_MAX, INT_MIN])
def test_signed_round_trip(spec, value):
    assert int(format_printf("%" + spec, value)) == value


def test_signed_wraps_like_c_int():
    assert format_printf("%d", INT_MAX + 1) == format_printf("%d", INT_MIN)
    assert format_printf("%d", INT_MIN) == "-2147483648"


def test_unsigned_wraps_negative():
    result = format_printf("%u", -1)
    assert result == format_printf("%u", 2**32 - 1)
    assert int(result) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 1, 255, 4096, 2**32 - 1])
def test_hex_round_trip(value):
    lower = format_printf("%x", value)
    upper = format_printf("%X", value)
    assert int(lower, 16) == value
    assert int(upper, 16) == value
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_hex_truncates_to_32_bits():
    assert format_printf("%x", -1) == format_printf("%x", 2**32 - 1)


def test_null_pointer():
    assert format_printf("%p", None) == "(nil)"
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_from_int():
    result = format_printf("%p", 0x1234)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 0x1234


def test_pointer_from_object_uses_id():
    marker = object()
    result = format_printf("%p", marker)
    assert int(result[2:], 16) == id(marker)


def test_unknown_conversion_is_dropped_without_consuming():
    assert format_printf("%a", "hello") == ""
    assert format_printf("%a%s", "hello") == "hello"


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_print_formatted_writes_and_counts(out):
    count = print_formatted("Error: Too many arguments\n", stream=out)
    assert out.getvalue() == "Error: Too many arguments\n"
    assert count == len(out.getvalue())


def test_print_formatted_counts_nul_char(out):
    assert print_formatted("%c", 0, stream=out) == 1
    assert out.getvalue() == "\0"


def test_print_formatted_count_matches_text(out):
    count = print_formatted("%s=%d (%x)", "n", 300, 300, stream=out)
    assert count == len(out.getvalue())
    assert out.getvalue() == format_printf("%s=%d (%x)", "n", 300, 300)