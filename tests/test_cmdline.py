import pytest

from ph2utils.cmdline import (
    expand_range_string,
    format_string,
    is_digit,
    is_valid_long_option_string,
    is_valid_option_string,
    split_option_and_value,
    split_string,
    trimmed_string,
)


@pytest.mark.parametrize("char", list("0123456789"))
def test_is_digit_true_for_digits(char):
    assert is_digit(char) is True


@pytest.mark.parametrize("char", ["a", "-", " ", "x"])
def test_is_digit_false_for_others(char):
    assert is_digit(char) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-a", True),
        ("--help", True),
        ("-svx", True),
        ("-", False),
        ("--", False),
        ("-5", False),
        ("abc", False),
        ("", False),
    ],
)
def test_is_valid_option_string(text, expected):
    assert is_valid_option_string(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("--ab", True), ("--help", True), ("--a", False), ("-abc", False), ("ab--", False)],
)
def test_is_valid_long_option_string(text, expected):
    assert is_valid_long_option_string(text) is expected


def test_split_option_and_value_with_assignment():
    assert split_option_and_value("foo=bar") == ("foo", "bar")


def test_split_option_and_value_without_assignment():
    assert split_option_and_value("foo") == ("foo", None)


def test_split_option_and_value_trailing_equals_is_not_assignment():
    assert split_option_and_value("foo=") == ("foo=", None)


def test_split_option_and_value_joins_extra_pieces():
    assert split_option_and_value("a=b=c") == ("a", "bc")


def test_split_string_default_delimiters():
    assert split_string("a b\tc\nd") == ["a", "b", "c", "d"]


def test_split_string_drops_empty_tokens():
    assert split_string(",,x,,y,", ",") == ["x", "y"]


def test_split_string_empty_input():
    assert split_string("", ",") == []


def test_trimmed_string():
    assert trimmed_string("  word \n\t") == "word"
    assert trimmed_string(" \t\n ") == ""
    assert trimmed_string("") == ""


def test_expand_range_documented_example():
    assert expand_range_string("1,3-5,14,25-20") == [1, 3, 4, 5, 14, 25, 24, 23, 22, 21, 20]


def test_expand_range_single_values():
    assert expand_range_string("7,2") == [7, 2]


def test_expand_range_equal_bounds():
    assert expand_range_string("3-3") == [3]


@pytest.mark.parametrize("text", ["1-2-3", "-5", "1,4-"])
def test_expand_range_malformed(text):
    with pytest.raises(ValueError):
        expand_range_string(text)


def test_format_string_indent_not_below_width_returns_input():
    text = "some text that is long enough"
    assert format_string(text, 4, 4) == text


def test_format_string_short_text_unchanged():
    assert format_string("hello world", 80) == "hello world"


def test_format_string_breaks_at_newlines():
    assert format_string("ab\ncd", 80) == "ab\ncd"


def test_format_string_wraps_within_width_and_keeps_words():
    text = "alpha beta gamma delta epsilon zeta eta theta"
    result = format_string(text, 12)
    lines = result.split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 12 for line in lines)
    assert " ".join(lines).split() == text.split()


def test_format_string_indents_every_line():
    text = "alpha beta gamma delta epsilon zeta eta theta"
    result = format_string(text, 16, 4)
    lines = result.split("\n")
    assert all(line.startswith("    ") for line in lines)
    assert all(len(line) <= 16 for line in lines)
    assert " ".join(line.strip() for line in lines).split() == text.split()


def test_format_string_hard_breaks_long_word():
    word = "x" * 25
    lines = format_string(word, 10).split("\n")
    assert "".join(lines) == word
    assert all(len(line) <= 10 for line in lines)