"""Number-shaped lexers.

These match the text of a number without converting it; the parsers in
``combilex.parsers.numbers`` add the conversion.

Shapes (ASCII digits only):
    int:    -?[0-9]+
    float:  -?[0-9]+\\.[0-9]*([eE][+-]?[0-9]+)?
    number: float, else int

Every digit run is consumed whole, however long. A number is never split
into a value and a leftover tail of digits.
"""

from combilex.core.protocols import Lex

from .characters import char, digit

__all__ = ["exponent_lexer", "float_lexer", "int_lexer", "number_lexer"]


def _digits(minimum: int) -> Lex:
    return digit().many(minimum)  # type: ignore[return-value]


def int_lexer() -> Lex:
    """Optional minus sign followed by one or more digits."""
    return char("-").optional().then(_digits(1))  # type: ignore[return-value]


def exponent_lexer() -> Lex:
    """Scientific-notation suffix such as ``e10`` or ``E-3``."""
    sign = char("+") | char("-")
    return (char("e") | char("E")).then(sign.optional()).then(_digits(1))  # type: ignore[return-value]


def float_lexer() -> Lex:
    """Integer part, a decimal point, optional fraction and optional exponent."""
    return (
        int_lexer()
        .then(char("."))
        .then(_digits(0))
        .then(exponent_lexer().optional())  # type: ignore[return-value]
    )


def number_lexer() -> Lex:
    """A float if one matches here, otherwise an integer."""
    return float_lexer() | int_lexer()  # type: ignore[return-value]
