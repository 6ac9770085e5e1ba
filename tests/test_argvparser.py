import pytest

from ph2utils.argvparser import ArgvParser, OptionAttribute, ParserResult


@pytest.fixture
def parser():
    p = ArgvParser()
    p.define_option("foo", "Fooishness", OptionAttribute.REQUIRES_VALUE)
    p.define_option("verbose", "Be verbose")
    p.define_option_alternative("verbose", "v")
    p.define_option("a")
    p.define_option("b")
    p.define_option("s", "", OptionAttribute.REQUIRES_VALUE)
    return p


def test_define_duplicate_raises(parser):
    with pytest.raises(ValueError):
        parser.define_option("foo")


def test_define_digit_short_option_raises():
    p = ArgvParser()
    with pytest.raises(ValueError):
        p.define_option("5")
    assert not p.is_defined_option("5")


def test_alternative_requires_original(parser):
    with pytest.raises(ValueError):
        parser.define_option_alternative("missing", "m")
    with pytest.raises(ValueError):
        parser.define_option_alternative("foo", "v")


def test_alternative_name_finds_option(parser):
    assert parser.parse(["-v"]) == ParserResult.NO_ERROR
    assert parser.found_option("verbose")
    assert parser.found_option("v")
    assert not parser.found_option("foo")


def test_long_option_with_following_value(parser):
    assert parser.parse(["--foo", "bar", "arg1", "arg2"]) == ParserResult.NO_ERROR
    assert parser.option_value("foo") == "bar"
    assert parser.all_arguments() == ["arg1", "arg2"]
    assert parser.arguments() == 2
    assert parser.argument(1) == "arg2"


def test_long_option_with_assignment(parser):
    assert parser.parse(["--foo=bar"]) == ParserResult.NO_ERROR
    assert parser.option_value("foo") == "bar"


def test_missing_value_at_end(parser):
    assert parser.parse(["--foo"]) == ParserResult.MISSING_VALUE
    assert parser.error_option() == "foo"


def test_value_that_is_an_option_is_missing(parser):
    assert parser.parse(["--foo", "-a"]) == ParserResult.MISSING_VALUE
    assert parser.error_option() == "foo"


def test_unknown_option(parser):
    assert parser.parse(["-x"]) == ParserResult.UNKNOWN_OPTION
    assert parser.error_option() == "x"
    assert parser.parse_error_description(ParserResult.UNKNOWN_OPTION) == "Unknown option: 'x'"


def test_unknown_long_option(parser):
    assert parser.parse(["--nothing"]) == ParserResult.UNKNOWN_OPTION
    assert parser.error_option() == "nothing"


def test_option_after_argument(parser):
    assert parser.parse(["arg", "-a"]) == ParserResult.OPTION_AFTER_ARGUMENT
    assert parser.error_option() == "-a"


def test_multiple_short_options(parser):
    assert parser.parse(["-ab"]) == ParserResult.NO_ERROR
    assert parser.found_option("a")
    assert parser.found_option("b")
    assert parser.option_value("a") == ""


def test_multiple_short_options_with_unknown(parser):
    assert parser.parse(["-az"]) == ParserResult.UNKNOWN_OPTION
    assert parser.error_option() == "z"


def test_malformed_multiple_short_option(parser):
    assert parser.parse(["-ab=3"]) == ParserResult.MALFORMED_MULTIPLE_SHORT_OPTION
    assert parser.error_option() == "ab"
    assert parser.parse_error_description(
        ParserResult.MALFORMED_MULTIPLE_SHORT_OPTION
    ) == "Malformed short-options: 'ab'"


@pytest.mark.parametrize("argv", [["-s", "4"], ["-s=4"]])
def test_short_option_value(parser, argv):
    assert parser.parse(argv) == ParserResult.NO_ERROR
    assert parser.option_value("s") == "4"


def test_short_option_missing_value(parser):
    assert parser.parse(["-s"]) == ParserResult.MISSING_VALUE
    assert parser.error_option() == "s"


def test_negative_number_is_argument(parser):
    assert parser.parse(["-a", "-5"]) == ParserResult.NO_ERROR
    assert parser.all_arguments() == ["-5"]


def test_negative_number_as_value(parser):
    assert parser.parse(["-s", "-7"]) == ParserResult.NO_ERROR
    assert parser.option_value("s") == "-7"


def test_required_option_missing():
    p = ArgvParser()
    p.define_option("input", "Input file", OptionAttribute.REQUIRED | OptionAttribute.REQUIRES_VALUE)
    p.define_option_alternative("input", "i")
    assert p.parse([]) == ParserResult.REQUIRED_OPTION_MISSING
    assert p.error_option() == "-i, --input"
    assert p.parse_error_description(ParserResult.REQUIRED_OPTION_MISSING) == (
        "Required option missing: '-i, --input'"
    )


def test_required_option_present():
    p = ArgvParser()
    p.define_option("input", "", OptionAttribute.REQUIRED | OptionAttribute.REQUIRES_VALUE)
    assert p.parse(["--input", "file.xml"]) == ParserResult.NO_ERROR
    assert p.option_value("input") == "file.xml"


def test_help_requested(parser):
    parser.set_help_option("h", "help", "Print this help")
    assert parser.parse(["--help"]) == ParserResult.HELP_REQUESTED
    assert parser.parse_error_description(ParserResult.HELP_REQUESTED) == parser.usage_description()


def test_help_short(parser):
    parser.set_help_option()
    assert parser.parse(["-h"]) == ParserResult.HELP_REQUESTED


def test_help_option_conflict(parser):
    with pytest.raises(ValueError):
        parser.set_help_option("v", "help")


def test_usage_description_content(parser):
    parser.set_introductory_description("This is foo written by bar.")
    parser.define_option("out", "", OptionAttribute.REQUIRED)
    usage = parser.usage_description()
    assert usage.startswith("This is foo written by bar.\n\nAvailable options\n-----------------\n")
    assert "--foo <value>\n    Fooishness\n\n" in usage
    assert "-v, --verbose\n    Be verbose\n\n" in usage
    assert "--out [required]\n    (no description)\n\n" in usage


def test_usage_description_error_codes(parser):
    parser.add_error_code(0, "Success")
    parser.add_error_code(1, "Error")
    usage = parser.usage_description()
    assert "Return codes\n-----------------\n" in usage
    assert "    0     Success\n" in usage
    assert usage.index("Success") < usage.index("Error")


def test_usage_description_empty_parser():
    assert ArgvParser().usage_description() == ""


def test_no_error_description_is_empty(parser):
    assert parser.parse_error_description(ParserResult.NO_ERROR) == ""


def test_invalid_error_code_raises(parser):
    with pytest.raises(ValueError):
        parser.parse_error_description(3)


def test_argument_out_of_range(parser):
    parser.parse(["one"])
    with pytest.raises(IndexError):
        parser.argument(1)


def test_option_value_of_undefined_option(parser):
    with pytest.raises(KeyError):
        parser.option_value("undefined")


def test_option_value_not_given_is_empty(parser):
    parser.parse([])
    assert parser.option_value("foo") == ""


def test_reset_clears_everything(parser):
    parser.parse(["-a", "arg"])
    parser.reset()
    assert not parser.is_defined_option("a")
    assert parser.all_arguments() == []
    assert parser.error_option() == ""


def test_all_arguments_returns_copy(parser):
    parser.parse(["x"])
    parser.all_arguments().append("y")
    assert parser.all_arguments() == ["x"]