"""Primitive lexers.

Lexers are the leaves of every grammar: they consume a span of input and
their value is that span. Compose them with the operator methods
(``then``, ``many``, ``count``, ``or_``...) or the constructors in
``combilex.combinators``.

Python 3.13+. Zero external dependencies.
"""

from .characters import (
    AnyChar,
    Char,
    CharIf,
    Digit,
    WhiteSpace,
    any_char,
    char,
    char_if,
    digit,
    hex,
    ws,
)
from .numbers import exponent_lexer, float_lexer, int_lexer, number_lexer
from .text import End, Take, TakeWhile, Token, Until, end, take, take_while, token, until

__all__ = [
    "AnyChar",
    "Char",
    "CharIf",
    "Digit",
    "End",
    "Take",
    "TakeWhile",
    "Token",
    "Until",
    "WhiteSpace",
    "any_char",
    "char",
    "char_if",
    "digit",
    "end",
    "exponent_lexer",
    "float_lexer",
    "hex",
    "int_lexer",
    "number_lexer",
    "take",
    "take_while",
    "token",
    "until",
    "ws",
]
