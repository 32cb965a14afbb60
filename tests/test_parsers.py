"""Tests for the ready-made parsers: numbers, switch, escape sequences."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from combilex import (
    CombinatorConfigError,
    OwnedParseError,
    Parse,
    ParseError,
    ParseResult,
    char,
    escape_sequence,
    floating,
    integer,
    number,
    switch,
    uint,
)
from combilex.diagnostics import DiagnosticCode, ErrorReason
from combilex.parsers import DEFAULT_ESCAPES, Switch
from combilex.syntax import Cursor

# ============================================================================
# NUMBERS
# ============================================================================


class TestInteger:
    """Test integer() and uint()."""

    @pytest.mark.parametrize(
        ("text", "value", "rest"),
        [
            ("123", 123, ""),
            ("-123abc", -123, "abc"),
            ("0", 0, ""),
            ("007", 7, ""),
            ("12.5", 12, ".5"),
        ],
    )
    def test_integer(self, text: str, value: int, rest: str) -> None:
        """integer() parses an optionally negative decimal integer."""
        assert tuple(integer().parse(text)) == (value, rest)

    def test_integer_empty(self) -> None:
        """Empty input fails for want of digits."""
        result = integer().parse("")

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.MINIMUM_REPETITIONS
        assert result.position == 0

    def test_integer_beyond_conversion_limit(self) -> None:
        """Digit runs int() refuses are conversion failures, not crashes."""
        result = integer().parse("1" * 5000)

        assert isinstance(result, ParseError)
        assert result.reason is ErrorReason.FAILED_CONVERSION
        assert isinstance(result.cause, ValueError)

    def test_uint(self) -> None:
        """uint() takes no sign."""
        assert tuple(uint().parse("42,")) == (42, ",")
        assert isinstance(uint().parse("-1"), ParseError)

    @pytest.mark.parametrize("parse_int", [integer, uint])
    def test_long_digit_run_not_split(self, parse_int: Callable[[], Parse[int]]) -> None:
        """An oversized digit run is rejected whole, never cut into a number and a tail."""
        text = "1" * 100_001
        result = parse_int().parse(text)

        assert isinstance(result, ParseError)
        assert result.reason is ErrorReason.FAILED_CONVERSION
        assert result.position == 0
        assert result.remainder == text


class TestFloating:
    """Test floating() and number()."""

    @pytest.mark.parametrize(
        ("text", "value", "rest"),
        [
            ("1.5", 1.5, ""),
            ("-2.5e2", -250.0, ""),
            ("1.0E-1x", 0.1, "x"),
            ("34.", 34.0, ""),
        ],
    )
    def test_floating(self, text: str, value: float, rest: str) -> None:
        """floating() parses decimal and scientific notation."""
        assert tuple(floating().parse(text)) == (value, rest)

    def test_floating_requires_point(self) -> None:
        """A bare integer is not a float."""
        assert isinstance(floating().parse("3"), ParseError)

    def test_long_fraction_consumed_whole(self) -> None:
        """A fraction longer than 100,000 digits is one number with nothing left over."""
        text = "0." + "1" * 100_001
        value, rest = floating().parse(text)

        assert value == float(text)
        assert rest == ""

    def test_number(self) -> None:
        """number() yields a float with a point and an int without."""
        as_float, _ = number().parse("3.5")
        as_int, rest = number().parse("-4x")

        assert as_float == 3.5
        assert isinstance(as_float, float)
        assert as_int == -4
        assert isinstance(as_int, int)
        assert rest == "x"


# ============================================================================
# CONVERSION BOUNDARY
# ============================================================================


class TestParseStr:
    """Test Parse.parse_str()."""

    def test_returns_bare_value(self) -> None:
        """parse_str returns the value itself."""
        assert integer().parse_str("42") == 42

    def test_requires_complete_input(self) -> None:
        """Leftover input is an error by default."""
        with pytest.raises(OwnedParseError) as exc_info:
            integer().parse_str("42x")

        error = exc_info.value
        assert error.code is DiagnosticCode.EXPECTED_END
        assert error.position == 2
        assert error.matched == "42"
        assert error.found == "x"

    def test_incomplete_allowed(self) -> None:
        """complete=False ignores leftover input."""
        assert integer().parse_str("42x", complete=False) == 42

    def test_owned_error_details(self) -> None:
        """The raised error is fully owned and located."""
        with pytest.raises(OwnedParseError) as exc_info:
            integer().then_skip("\n").then(char("y")).parse_str("1\nx")

        error = exc_info.value
        assert error.position == 2
        assert (error.line, error.column) == (2, 1)
        assert error.expected == "literal 'y'"
        assert error.input_text == "1\nx"
        assert error.remainder == "x"
        assert error.matched == "1\n"

    def test_conversion_cause_chained(self) -> None:
        """A conversion failure is chained to the original exception."""
        with pytest.raises(OwnedParseError) as exc_info:
            integer().parse_str("9" * 5000)

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.reason is ErrorReason.FAILED_CONVERSION


# ============================================================================
# SWITCH
# ============================================================================


class TestSwitch:
    """Test switch()."""

    def test_selects_value(self) -> None:
        """The first matching case selects its value."""
        direction = switch([("up", 1), ("down", -1)])

        assert isinstance(direction, Switch)
        assert direction.parse("down!") == ParseResult(-1, Cursor("down!", 4))

    def test_order_matters(self) -> None:
        """Cases are tried in order."""
        ops = switch([("<=", "le"), ("<", "lt")])

        assert tuple(ops.parse("<=1")) == ("le", "1")
        assert tuple(ops.parse("<1")) == ("lt", "1")

    def test_no_match(self) -> None:
        """No matching case lists every expectation."""
        result = switch([("up", 1), ("down", -1)]).parse("left")

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.NO_ALTERNATIVE
        assert result.expected == "one of literal 'up', literal 'down'"
        assert result.position == 0


# ============================================================================
# ESCAPE SEQUENCES
# ============================================================================


def quoted_string():  # type: ignore[no-untyped-def]
    body = escape_sequence().many().until('"').map("".join)
    return char('"').skip_then(body).then_skip('"')


class TestEscapeSequence:
    """Test escape_sequence()."""

    def test_plain_character(self) -> None:
        """A plain character is itself."""
        assert tuple(escape_sequence().parse("ab")) == ("a", "b")

    def test_known_escape(self) -> None:
        """escape + code is replaced."""
        assert tuple(escape_sequence().parse("\\tx")) == ("\t", "x")

    def test_unknown_escape(self) -> None:
        """An unknown code is a conversion failure at the escape character."""
        result = escape_sequence().parse("\\a")

        assert isinstance(result, ParseError)
        assert result.reason is ErrorReason.FAILED_CONVERSION
        assert result.code is DiagnosticCode.INVALID_ESCAPE
        assert result.remainder == "\\a"
        assert result.found == "\\a"

    def test_escape_at_end(self) -> None:
        """A lone escape character at end of input does not match."""
        result = escape_sequence().parse("\\")

        assert isinstance(result, ParseError)
        assert result.reason is ErrorReason.NO_MATCH

    def test_empty_input(self) -> None:
        """Empty input is an end-of-input failure."""
        result = escape_sequence().parse("")

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.UNEXPECTED_EOF

    def test_custom_codes(self) -> None:
        """Escape character and codes are configurable."""
        percent = escape_sequence("%", {"n": "\n", "%": "%"})

        assert tuple(percent.parse("%%")) == ("%", "")
        assert isinstance(percent.parse("%t"), ParseError)

    def test_default_codes(self) -> None:
        """Defaults cover the usual C-style escapes."""
        assert DEFAULT_ESCAPES["n"] == "\n"
        assert DEFAULT_ESCAPES['"'] == '"'

    def test_invalid_configuration(self) -> None:
        """Escape character and codes must be single characters."""
        with pytest.raises(CombinatorConfigError):
            escape_sequence("ab")
        with pytest.raises(CombinatorConfigError):
            escape_sequence("\\", {"nn": "\n"})

    def test_quoted_string(self) -> None:
        """Escapes compose into a quoted-string parser."""
        assert tuple(quoted_string().parse('"abc"')) == ("abc", "")
        assert tuple(quoted_string().parse('"abc\\n\\t123\\r\\n"')) == ("abc\n\t123\r\n", "")

    def test_quoted_string_escaped_quote(self) -> None:
        """An escaped quote does not end the string."""
        assert tuple(quoted_string().parse('"say \\"hi\\""!')) == ('say "hi"', "!")

    def test_unterminated_string(self) -> None:
        """A missing closing quote fails at end of input."""
        result = quoted_string().parse('"abc')

        assert isinstance(result, ParseError)
        assert result.found is None
