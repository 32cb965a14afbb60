"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!

    Two groups of templates live here:
        - ``describe_*``: short "expected" descriptions stored on parse errors.
          Combinators build these once at construction time where possible so
          that failing is cheap.
        - Diagnostic builders: full Diagnostic objects for owned errors and
          configuration errors.
    """

    # ------------------------------------------------------------------
    # Expectation descriptions
    # ------------------------------------------------------------------

    @staticmethod
    def describe_character(description: str) -> str:
        """Expectation for a single-character predicate matcher."""
        return f"character matching {description}"

    @staticmethod
    def describe_literal(literal: str) -> str:
        """Expectation for a literal token matcher."""
        return f"literal {literal!r}"

    @staticmethod
    def describe_digit(radix: int) -> str:
        """Expectation for a digit matcher of the given radix."""
        if radix == 10:
            return "character matching ASCII digit"
        return f"character matching base-{radix} digit"

    @staticmethod
    def describe_end() -> str:
        """Expectation for the end-of-input matcher."""
        return "end of input"

    @staticmethod
    def describe_characters(count: int) -> str:
        """Expectation for a fixed-width take."""
        if count == 1:
            return "any character"
        return f"{count} more characters"

    @staticmethod
    def describe_until(pattern: str) -> str:
        """Expectation for an until-pattern lexer."""
        return f"literal {pattern!r} ahead"

    @staticmethod
    def describe_repetitions(minimum: int, count: int) -> str:
        """Expectation for a repetition that fell short of its lower bound."""
        return f"at least {minimum} repetitions, got {count}"

    @staticmethod
    def describe_alternatives(descriptions: tuple[str, ...]) -> str:
        """Expectation for a switch over several lexers."""
        return "one of " + ", ".join(descriptions)

    @staticmethod
    def describe_conversion(detail: str | None) -> str:
        """Expectation for a fallible transform that rejected its input."""
        if detail:
            return f"convertible content ({detail})"
        return "convertible content"

    @staticmethod
    def describe_escape(escape_char: str, codes: str) -> str:
        """Expectation for an escape sequence with an unknown code."""
        options = ", ".join(repr(escape_char + code) for code in codes)
        return f"escape sequence ({options})"

    # ------------------------------------------------------------------
    # Parse failures (owned errors)
    # ------------------------------------------------------------------

    _HINTS: dict[DiagnosticCode, str] = {
        DiagnosticCode.EXPECTED_CHARACTER: "The character at this position is not accepted here",
        DiagnosticCode.EXPECTED_LITERAL: "The input does not start with the expected literal",
        DiagnosticCode.EXPECTED_END: "Remove the trailing input or extend the parser to consume it",
        DiagnosticCode.UNEXPECTED_EOF: "The input ended before the parser was satisfied",
        DiagnosticCode.NO_ALTERNATIVE: "None of the alternatives matched",
        DiagnosticCode.MINIMUM_REPETITIONS: "Too few repetitions matched before the item failed",
        DiagnosticCode.FAILED_CONVERSION: "The matched text could not be converted",
        DiagnosticCode.INVALID_ESCAPE: "Use one of the supported escape sequences",
    }

    @staticmethod
    def parse_failed(
        code: DiagnosticCode,
        expected: str,
        found: str | None,
        span: SourceSpan,
    ) -> Diagnostic:
        """Parse failure at a source position.

        Args:
            code: Diagnostic code of the failing combinator
            expected: What was being matched
            found: Input fragment found instead (None at end of input)
            span: Location of the failure

        Returns:
            Diagnostic for the failure
        """
        if found is None:
            msg = f"expected {expected}, found end of input"
        else:
            msg = f"expected {expected}, found {found!r}"
        return Diagnostic(
            code=code,
            message=msg,
            span=span,
            hint=ErrorTemplate._HINTS.get(code),
            expected=expected,
            found=found,
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of its source.

        Args:
            position: Position of the read

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check is_eof before reading the current character",
        )

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_bounds(minimum: int, maximum: int | None) -> Diagnostic:
        """Repetition declared with a negative bound.

        Args:
            minimum: Declared lower bound
            maximum: Declared upper bound (None = unbounded)

        Returns:
            Diagnostic for INVALID_BOUNDS
        """
        upper = "unbounded" if maximum is None else str(maximum)
        msg = f"Invalid repetition bounds: minimum={minimum}, maximum={upper}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_BOUNDS,
            message=msg,
            hint="Repetition bounds must be non-negative integers",
        )

    @staticmethod
    def empty_literal() -> Diagnostic:
        """Literal matcher constructed with an empty string."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LITERAL,
            message="Literal must not be empty",
            hint="Use end() or optional() for zero-length matches",
        )

    @staticmethod
    def invalid_radix(radix: int) -> Diagnostic:
        """Digit matcher constructed with an unsupported radix.

        Args:
            radix: Requested radix

        Returns:
            Diagnostic for INVALID_RADIX
        """
        msg = f"Radix must be between 2 and 36, got {radix}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RADIX,
            message=msg,
            hint="Digits are drawn from 0-9 followed by a-z",
        )

    @staticmethod
    def invalid_character(value: str) -> Diagnostic:
        """Character matcher constructed with something other than one character.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for INVALID_CHARACTER
        """
        msg = f"Expected a single character, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message=msg,
            hint="Use token() to match multi-character literals",
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale-aware parser constructed with an unknown locale.

        Args:
            locale_code: The locale identifier that was not recognized

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale: '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a valid BCP 47 or POSIX locale identifier (e.g., 'en-US', 'de_DE')",
        )
