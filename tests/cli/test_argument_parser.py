"""
Unit tests for dewpoint.cli._argument_parser
"""

import pytest

from dewpoint.cli._argument_parser import (
    ParsedArguments,
    parse_arguments,
    read_float,
    split_arguments,
)
from dewpoint.cli._errors import (
    HelpRequested,
    InvalidHumidity,
    InvalidTemperature,
    UnrecognizedOption,
    UsageError,
)
from dewpoint.shared import TemperatureUnit

US_LOCALE = "en_US.UTF-8"
DE_LOCALE = "de_DE.UTF-8"


# ==============================================================================
# Test Class: Float literals
# ==============================================================================

class TestReadFloat:
    """Test full-consume float parsing."""

    @pytest.mark.parametrize("token,expected", [
        ("20", 20.0),
        ("-5", -5.0),
        ("+7.25", 7.25),
        (".5", 0.5),
        ("1e2", 100.0),
        ("2.5E-1", 0.25),
        ("  42", 42.0),
        ("0x1.8p1", 3.0),
        ("-0X10", -16.0),
    ])
    def test_valid_literals(self, token, expected):
        assert read_float(token) == expected

    @pytest.mark.parametrize("token", [
        "",
        "abc",
        "20x",
        "20 ",
        "1_000",
        "--5",
        "1.2.3",
        "0x",
        "ff",
    ])
    def test_invalid_literals(self, token):
        assert read_float(token) is None

    def test_special_values_parse(self):
        assert read_float("inf") == float("inf")
        assert read_float("nan") != read_float("nan")


# ==============================================================================
# Test Class: Options and positionals
# ==============================================================================

class TestParseArguments:
    """Test option handling and positional validation."""

    def test_returns_parsed_arguments(self):
        parsed = parse_arguments(["-c", "20", "50"], US_LOCALE)

        assert parsed == ParsedArguments(unit=TemperatureUnit.CELSIUS, temperature=20.0, humidity=50.0)

    def test_locale_default_fahrenheit(self):
        assert parse_arguments(["68", "50"], US_LOCALE).unit == TemperatureUnit.FAHRENHEIT

    def test_locale_default_celsius(self):
        assert parse_arguments(["20", "50"], DE_LOCALE).unit == TemperatureUnit.CELSIUS

    @pytest.mark.parametrize("flag", ["-c", "--celsius", "--centigrade"])
    def test_celsius_flags(self, flag):
        assert parse_arguments([flag, "20", "50"], US_LOCALE).unit == TemperatureUnit.CELSIUS

    @pytest.mark.parametrize("flag", ["-f", "--fahrenheit"])
    def test_fahrenheit_flags(self, flag):
        assert parse_arguments([flag, "68", "50"], DE_LOCALE).unit == TemperatureUnit.FAHRENHEIT

    def test_last_unit_flag_wins(self):
        assert parse_arguments(["-c", "-f", "68", "50"], DE_LOCALE).unit == TemperatureUnit.FAHRENHEIT
        assert parse_arguments(["-f", "-c", "20", "50"], US_LOCALE).unit == TemperatureUnit.CELSIUS
        assert parse_arguments(["--fahrenheit", "--centigrade", "20", "50"], DE_LOCALE).unit == TemperatureUnit.CELSIUS

    def test_options_after_positionals(self):
        parsed = parse_arguments(["20", "50", "-f"], DE_LOCALE)

        assert parsed.unit == TemperatureUnit.FAHRENHEIT
        assert (parsed.temperature, parsed.humidity) == (20.0, 50.0)

    def test_options_between_positionals(self):
        parsed = parse_arguments(["20", "-c", "50"], US_LOCALE)

        assert parsed == ParsedArguments(unit=TemperatureUnit.CELSIUS, temperature=20.0, humidity=50.0)

    def test_negative_temperature_is_positional(self):
        parsed = parse_arguments(["-c", "-10", "70"], US_LOCALE)

        assert parsed.temperature == -10.0
        assert parsed.humidity == 70.0

    def test_double_dash_ends_options(self):
        parsed = parse_arguments(["-c", "--", "-1e3", "40"], US_LOCALE)

        assert parsed == ParsedArguments(unit=TemperatureUnit.CELSIUS, temperature=-1000.0, humidity=40.0)

    def test_options_after_double_dash_are_positionals(self):
        with pytest.raises(InvalidTemperature) as exc_info:
            parse_arguments(["--", "--help", "50"], US_LOCALE)

        assert exc_info.value.token == "--help"

    @pytest.mark.parametrize("token,expected", [
        ("-1e3", -1000.0),
        ("-2.5E1", -25.0),
        ("-0x1p3", -8.0),
        ("-.5", -0.5),
    ])
    def test_negative_literals_are_positionals(self, token, expected):
        parsed = parse_arguments(["-c", token, "50"], US_LOCALE)

        assert parsed.temperature == expected
        assert parsed.unit == TemperatureUnit.CELSIUS


# ==============================================================================
# Test Class: Option/positional split
# ==============================================================================

class TestSplitArguments:
    """Test separation of option tokens from positionals."""

    def test_keeps_positional_order(self):
        assert split_arguments(["-1e3", "-f", "50"]) == (["-f"], ["-1e3", "50"])

    def test_double_dash_is_dropped(self):
        assert split_arguments(["-c", "--", "-x", "--"]) == (["-c"], ["-x", "--"])

    def test_lone_dash_is_positional(self):
        assert split_arguments(["-", "50"]) == ([], ["-", "50"])

    def test_non_numeric_dash_tokens_are_options(self):
        assert split_arguments(["-inf", "-nan", "-e3", "--kelvin"]) == (["-e3", "--kelvin"], ["-inf", "-nan"])


# ==============================================================================
# Test Class: Failures
# ==============================================================================

class TestParseArgumentsFailures:
    """Test every failure path of the parser."""

    @pytest.mark.parametrize("argv", [
        ["--help"],
        ["--help", "abc"],
        ["-c", "20", "50", "--help"],
        ["--bogus", "--help"],
        ["20", "0", "--help"],
    ])
    def test_help_wins(self, argv):
        with pytest.raises(HelpRequested):
            parse_arguments(argv, US_LOCALE)

    @pytest.mark.parametrize("argv", [
        [],
        ["20"],
        ["20", "50", "30"],
        ["-c"],
    ])
    def test_wrong_positional_count(self, argv):
        with pytest.raises(UsageError) as exc_info:
            parse_arguments(argv, US_LOCALE)

        assert type(exc_info.value) is UsageError
        assert str(exc_info.value) == ""

    def test_unrecognized_long_option(self):
        with pytest.raises(UnrecognizedOption) as exc_info:
            parse_arguments(["--bogus", "20", "50"], US_LOCALE)

        assert exc_info.value.option == "--bogus"
        assert str(exc_info.value) == "dewpoint: unrecognized option '--bogus'"

    def test_unrecognized_short_option(self):
        with pytest.raises(UnrecognizedOption) as exc_info:
            parse_arguments(["-x", "20", "50"], US_LOCALE)

        assert exc_info.value.option == "-x"

    def test_unrecognized_option_is_usage_error(self):
        with pytest.raises(UsageError):
            parse_arguments(["20", "--kelvin", "50"], US_LOCALE)

    @pytest.mark.parametrize("token", ["abc", "20C", "inf", "nan", ""])
    def test_invalid_temperature(self, token):
        with pytest.raises(InvalidTemperature) as exc_info:
            parse_arguments([token, "50"], US_LOCALE)

        assert exc_info.value.token == token
        assert str(exc_info.value) == f'dewpoint: invalid temperature "{token}"'

    @pytest.mark.parametrize("token", ["0", "-5", "0.0", "abc", "50%", "nan", "inf"])
    def test_invalid_humidity(self, token):
        with pytest.raises(InvalidHumidity) as exc_info:
            parse_arguments(["20", token], US_LOCALE)

        assert exc_info.value.token == token
        assert str(exc_info.value) == f'dewpoint: invalid humidity "{token}"'

    def test_temperature_checked_before_humidity(self):
        with pytest.raises(InvalidTemperature):
            parse_arguments(["abc", "0"], US_LOCALE)

    def test_humidity_rejected_in_both_units(self):
        for flag in ["-c", "-f"]:
            with pytest.raises(InvalidHumidity):
                parse_arguments([flag, "-40", "0"], US_LOCALE)
