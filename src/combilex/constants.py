"""Shared constants for combilex.

This module provides centralized configuration constants used across the
lexer, combinator and parser packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Repetition limits: Upper bounds for open-ended repetition
- Character classes: Radix digit table
- Error reporting: Size of input fragments captured in errors
- Locale defaults: Locale used by locale-aware parsers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Repetition limits
    "MAX_REPETITIONS",
    # Character classes
    "RADIX_DIGITS",
    "MIN_RADIX",
    "MAX_RADIX",
    # Error reporting
    "MAX_FOUND_LENGTH",
    # Locale defaults
    "DEFAULT_LOCALE",
]

# ============================================================================
# REPETITION LIMITS
# ============================================================================

# Ceiling used when a repetition is declared without an upper bound.
# Any input long enough to reach it is already far beyond what an in-memory
# str can hold, so in practice this reads as "unbounded".
MAX_REPETITIONS: int = 2**62

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Digit alphabet for radix 2..36, lowercase. Uppercase is accepted as well.
RADIX_DIGITS: str = "0123456789abcdefghijklmnopqrstuvwxyz"

MIN_RADIX: int = 2
MAX_RADIX: int = 36

# ============================================================================
# ERROR REPORTING
# ============================================================================

# Maximum length of the "found" fragment rendered in error messages.
# Errors keep a length into the source rather than a copy; this only bounds
# what is shown to humans.
MAX_FOUND_LENGTH: int = 40

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALE: str = "en_US"
