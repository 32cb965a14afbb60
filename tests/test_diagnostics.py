"""Tests for the diagnostics package: codes, templates, formatter, exceptions."""

from __future__ import annotations

import json

import pytest

from combilex.diagnostics import (
    CombilexError,
    CombinatorConfigError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorReason,
    ErrorTemplate,
    OutputFormat,
    OwnedParseError,
    SourceSpan,
)

# ============================================================================
# CODES AND SPANS
# ============================================================================


class TestDiagnosticCodes:
    """Test code layout and reasons."""

    def test_codes_are_unique(self) -> None:
        """No two diagnostic codes share a value."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.EXPECTED_CHARACTER, 1000, 1999),
            (DiagnosticCode.MINIMUM_REPETITIONS, 2000, 2999),
            (DiagnosticCode.FAILED_CONVERSION, 3000, 3999),
            (DiagnosticCode.INVALID_BOUNDS, 4000, 4999),
        ],
    )
    def test_code_categories(self, code: DiagnosticCode, low: int, high: int) -> None:
        """Codes fall in their category range."""
        assert low <= code.value <= high

    def test_error_reason_is_str(self) -> None:
        """ErrorReason compares equal to its string value."""
        assert ErrorReason.NO_MATCH == "no_match"
        assert str(ErrorReason.FAILED_CONVERSION) == "failed_conversion"


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid_span(self) -> None:
        """A well-formed span is accepted."""
        span = SourceSpan(start=2, end=4, line=1, column=3)

        assert span.end - span.start == 2

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"start": -1, "end": 0, "line": 1, "column": 1},
            {"start": 3, "end": 2, "line": 1, "column": 1},
            {"start": 0, "end": 0, "line": 0, "column": 1},
            {"start": 0, "end": 0, "line": 1, "column": 0},
        ],
    )
    def test_invalid_span_rejected(self, kwargs: dict[str, int]) -> None:
        """Invalid spans raise ValueError."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(**kwargs)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Test expectation descriptions and diagnostic builders."""

    def test_describe_character(self) -> None:
        """Character predicate expectation."""
        assert ErrorTemplate.describe_character("isalpha") == "character matching isalpha"

    def test_describe_literal(self) -> None:
        """Literal expectation quotes the literal."""
        assert ErrorTemplate.describe_literal("#") == "literal '#'"

    @pytest.mark.parametrize(
        ("radix", "expected"),
        [
            (10, "character matching ASCII digit"),
            (16, "character matching base-16 digit"),
        ],
    )
    def test_describe_digit(self, radix: int, expected: str) -> None:
        """Digit expectation mentions non-decimal radices."""
        assert ErrorTemplate.describe_digit(radix) == expected

    def test_describe_repetitions(self) -> None:
        """Repetition expectation reports bound and count."""
        assert (
            ErrorTemplate.describe_repetitions(3, 1) == "at least 3 repetitions, got 1"
        )

    def test_describe_alternatives(self) -> None:
        """Alternatives are joined in order."""
        assert (
            ErrorTemplate.describe_alternatives(("literal 'a'", "literal 'b'"))
            == "one of literal 'a', literal 'b'"
        )

    def test_describe_conversion(self) -> None:
        """Conversion expectation includes the detail when there is one."""
        assert ErrorTemplate.describe_conversion(None) == "convertible content"
        assert ErrorTemplate.describe_conversion("bad") == "convertible content (bad)"

    def test_parse_failed(self) -> None:
        """parse_failed builds a located diagnostic with a hint."""
        span = SourceSpan(start=0, end=1, line=1, column=1)
        diagnostic = ErrorTemplate.parse_failed(
            DiagnosticCode.EXPECTED_LITERAL, "literal '#'", "x", span
        )

        assert diagnostic.message == "expected literal '#', found 'x'"
        assert diagnostic.span == span
        assert diagnostic.hint is not None
        assert diagnostic.expected == "literal '#'"

    def test_parse_failed_at_eof(self) -> None:
        """A missing fragment is reported as end of input."""
        span = SourceSpan(start=2, end=2, line=1, column=3)
        diagnostic = ErrorTemplate.parse_failed(
            DiagnosticCode.EXPECTED_CHARACTER, "digit", None, span
        )

        assert diagnostic.message == "expected digit, found end of input"

    def test_configuration_diagnostics(self) -> None:
        """Configuration builders carry their codes."""
        assert ErrorTemplate.invalid_bounds(-1, None).code is DiagnosticCode.INVALID_BOUNDS
        assert ErrorTemplate.empty_literal().code is DiagnosticCode.EMPTY_LITERAL
        assert ErrorTemplate.invalid_radix(40).code is DiagnosticCode.INVALID_RADIX
        assert ErrorTemplate.invalid_character("ab").code is DiagnosticCode.INVALID_CHARACTER
        assert ErrorTemplate.locale_unknown("xx").code is DiagnosticCode.LOCALE_UNKNOWN

    def test_invalid_bounds_message(self) -> None:
        """Unbounded maximum is spelled out."""
        message = ErrorTemplate.invalid_bounds(-1, None).message

        assert message == "Invalid repetition bounds: minimum=-1, maximum=unbounded"


# ============================================================================
# FORMATTER
# ============================================================================


def _located() -> Diagnostic:
    return Diagnostic(
        code=DiagnosticCode.EXPECTED_LITERAL,
        message="expected literal '#', found 'x'",
        span=SourceSpan(start=0, end=1, line=1, column=1),
        hint="Check the input",
        expected="literal '#'",
        found="x",
    )


class TestDiagnosticFormatter:
    """Test output formats."""

    def test_rust_format(self) -> None:
        """Rust style lists location, expectation, found and help."""
        text = DiagnosticFormatter().format(_located())

        assert text.split("\n") == [
            "error[EXPECTED_LITERAL]: expected literal '#', found 'x'",
            "  --> line 1, column 1",
            "  = expected: literal '#'",
            "  = found: 'x'",
            "  = help: Check the input",
        ]

    def test_rust_format_without_span(self) -> None:
        """Configuration diagnostics have no location lines."""
        text = DiagnosticFormatter().format(ErrorTemplate.empty_literal())

        assert "-->" not in text
        assert text.startswith("error[EMPTY_LITERAL]: Literal must not be empty")

    def test_simple_format(self) -> None:
        """Simple style is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(_located()) == (
            "EXPECTED_LITERAL: expected literal '#', found 'x'"
        )

    def test_json_format(self) -> None:
        """JSON style is machine readable."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(_located()))

        assert data["code"] == "EXPECTED_LITERAL"
        assert data["code_value"] == 1002
        assert data["line"] == 1
        assert data["found"] == "x"
        assert data["expected"] == "literal '#'"

    def test_control_characters_escaped(self) -> None:
        """Control characters in messages cannot break the output layout."""
        diagnostic = Diagnostic(code=DiagnosticCode.EXPECTED_END, message="found 'a\nb'")
        text = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)

        assert "\n" not in text
        assert "\\n" in text

    def test_sanitize_truncates(self) -> None:
        """Sanitizing truncates long content."""
        diagnostic = Diagnostic(code=DiagnosticCode.EXPECTED_END, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(diagnostic) == "EXPECTED_END: " + "x" * 10 + "..."

    def test_color(self) -> None:
        """Color mode wraps the severity in ANSI codes."""
        text = DiagnosticFormatter(color=True).format(_located())

        assert text.startswith("\033[1;31merror\033[0m")

    def test_color_warning(self) -> None:
        """Warnings are colored yellow instead of red."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.EXPECTED_END, message="trailing input", severity="warning"
        )
        text = DiagnosticFormatter(color=True).format(diagnostic)

        assert text.startswith("\033[1;33mwarning\033[0m[EXPECTED_END]")

    def test_format_all(self) -> None:
        """format_all separates diagnostics with blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format_all([_located(), _located()]).count("\n\n") == 1


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Test the exception hierarchy."""

    def test_combilex_error_from_string(self) -> None:
        """A plain message leaves diagnostic unset."""
        error = CombilexError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_combilex_error_from_diagnostic(self) -> None:
        """A diagnostic is kept and formatted as the message."""
        diagnostic = ErrorTemplate.invalid_radix(1)
        error = CombilexError(diagnostic)

        assert error.diagnostic is diagnostic
        assert "INVALID_RADIX" in str(error)

    def test_config_error_is_value_error(self) -> None:
        """CombinatorConfigError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Literal must not be empty"):
            raise CombinatorConfigError(ErrorTemplate.empty_literal())

    def test_owned_parse_error_fields(self) -> None:
        """Code and location are plain attributes taken from the constructor."""
        span = SourceSpan(start=4, end=5, line=2, column=3)
        error = OwnedParseError(
            _located(),
            span=span,
            reason=ErrorReason.NO_MATCH,
            expected="literal '#'",
            position=4,
            found="x",
            input_text="ab\ncdx",
            remainder="x",
        )

        assert error.code is DiagnosticCode.EXPECTED_LITERAL
        assert error.span is span
        assert (error.line, error.column) == (2, 3)
        assert error.matched == "ab\ncd"
        assert error.cause is None
