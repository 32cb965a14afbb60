"""Core abstractions shared by lexers, combinators and parsers.

This package provides the two combinator contracts and the optional Babel
integration. Keeping them here maintains a clean dependency graph:

    diagnostics <- syntax <- core <- lexers <- combinators <- parsers

Exports:
    Parse: Base class for value-producing combinators
    Lex: Base class for combinators whose value is the matched span
    parser / lexer: Wrap plain functions as combinators
    coerce: Turn string literals into token lexers

Python 3.13+.
"""

from .protocols import (
    FunctionLexer,
    FunctionParser,
    Lex,
    Outcome,
    Parse,
    coerce,
    lexer,
    parser,
    spanned,
)

__all__ = [
    "FunctionLexer",
    "FunctionParser",
    "Lex",
    "Outcome",
    "Parse",
    "coerce",
    "lexer",
    "parser",
    "spanned",
]
