"""Number parsers: the number lexers plus conversion.

Conversion is done with the builtin constructors (``int``, ``float``), so a
lexed value the constructor still rejects (e.g. more digits than the
interpreter's integer string limit, ``sys.int_info.str_digits_check_threshold``)
is a conversion failure, not a crash.
"""

from combilex.core.protocols import Parse
from combilex.lexers import digit, float_lexer, int_lexer

__all__ = ["floating", "integer", "number", "uint"]


def integer() -> Parse[int]:
    """Signed decimal integer: ``-?[0-9]+``.

    Example:
        >>> integer().parse("-123abc")
        ParseResult(value=-123, cursor=Cursor(source='-123abc', pos=4))
    """
    return int_lexer().try_map(int)


def uint() -> Parse[int]:
    """Unsigned decimal integer: ``[0-9]+``."""
    return digit().many(1).try_map(int)


def floating() -> Parse[float]:
    """Decimal number with a point and optional exponent, e.g. ``-1.5e3``.

    A bare integer is not a float here; use ``number()`` to accept both.
    """
    return float_lexer().try_map(float)


def number() -> Parse[float | int]:
    """A float when the input has a decimal point, otherwise an integer.

    Example:
        >>> number().parse("3.5").value, number().parse("3").value
        (3.5, 3)
    """
    return floating() | integer()
