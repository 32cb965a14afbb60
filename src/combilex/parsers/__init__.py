"""Value-producing parsers built from the lexers and combinators.

``locale_decimal`` needs Babel; importing this package does not.
"""

from .escape import DEFAULT_ESCAPES, EscapeSequence, escape_sequence
from .locale import locale_decimal
from .numbers import floating, integer, number, uint
from .switch import Switch, switch

__all__ = [
    "DEFAULT_ESCAPES",
    "EscapeSequence",
    "Switch",
    "escape_sequence",
    "floating",
    "integer",
    "locale_decimal",
    "number",
    "switch",
    "uint",
]
