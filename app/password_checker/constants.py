"""Password checker constants file."""

from typing import Literal

MIN_LENGTH: Literal[6] = 6

WEAK_MIN_LENGTH: Literal[6] = 6
WEAK_MAX_LENGTH: Literal[9] = 9

MAX_REPEATING_SYMBOLS_IN_ROW: Literal[2] = 2

REGEXP_UPPERCASE_LETTERS: str = r"[A-Z]"
REGEXP_LOWERCASE_LETTERS: str = r"[a-z]"
REGEXP_DIGITS: str = r"[0-9]"
REGEXP_SPECIAL_SYMBOLS: str = r"[^a-zA-Z0-9]"
REGEXP_REPEATING_SYMBOLS: str = rf"(.)\1{{{MAX_REPEATING_SYMBOLS_IN_ROW}}}"
