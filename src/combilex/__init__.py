"""combilex - composable parser combinators for turning text into typed values.

Small, immutable building blocks are chained into parsers; there is no grammar
file and no code generation. Every combinator either consumes a prefix of its
input and returns a value with the remaining input, or returns a structured,
position-aware ParseError.

Public API:
    Parse / Lex - Base classes (value-producing parsers, span-producing lexers)
    char_if, char, token, digit, hex, ws, any_char, end, take, take_while, until
        - Primitive lexers
    then, skip_then, then_skip, many, count, delimited, all_of, optional, or_,
    pad, crawl, map_, try_map - Composition operators (also chainable methods)
    integer, uint, floating, number, switch, escape_sequence, locale_decimal
        - Ready-made parsers
    parser / lexer - Wrap plain functions as combinators

Errors:
    ParseError - Borrowing parse failure (a value, returned by parse())
    OwnedParseError - Owned parse failure (an exception, raised by parse_str())
    CombinatorConfigError - Invalid combinator construction arguments

Submodules:
    combilex.syntax - Cursor, ParseResult, ParseError
    combilex.diagnostics - Diagnostic codes, templates, formatter, exceptions
    combilex.combinators - Operator classes and constructors
    combilex.lexers / combilex.parsers - Building blocks
"""

from .combinators import (
    all_of,
    count,
    crawl,
    delimited,
    many,
    map_,
    optional,
    or_,
    pad,
    skip_then,
    then,
    then_skip,
    try_map,
)
from .core import Lex, Parse, lexer, parser
from .diagnostics import CombilexError, CombinatorConfigError, OwnedParseError
from .lexers import (
    any_char,
    char,
    char_if,
    digit,
    end,
    hex,
    take,
    take_while,
    token,
    until,
    ws,
)
from .parsers import (
    escape_sequence,
    floating,
    integer,
    locale_decimal,
    number,
    switch,
    uint,
)
from .syntax import Cursor, ParseError, ParseResult

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    # This should never happen on Python 3.13+ (importlib.metadata is stdlib since 3.8)
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("combilex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: pip install -e .
    __version__ = "0.0.0+dev"

__all__ = [
    "CombilexError",
    "CombinatorConfigError",
    "Cursor",
    "Lex",
    "OwnedParseError",
    "Parse",
    "ParseError",
    "ParseResult",
    "__version__",
    "all_of",
    "any_char",
    "char",
    "char_if",
    "count",
    "crawl",
    "delimited",
    "digit",
    "end",
    "escape_sequence",
    "floating",
    "hex",
    "integer",
    "lexer",
    "locale_decimal",
    "many",
    "map_",
    "number",
    "optional",
    "or_",
    "pad",
    "parser",
    "skip_then",
    "switch",
    "take",
    "take_while",
    "then",
    "then_skip",
    "token",
    "try_map",
    "uint",
    "until",
    "ws",
]
