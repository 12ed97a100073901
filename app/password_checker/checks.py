"""Checks for Password Checker.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

from .constants import (
    MIN_LENGTH,
    REGEXP_DIGITS,
    REGEXP_LOWERCASE_LETTERS,
    REGEXP_REPEATING_SYMBOLS,
    REGEXP_SPECIAL_SYMBOLS,
    REGEXP_UPPERCASE_LETTERS,
    WEAK_MAX_LENGTH,
    WEAK_MIN_LENGTH,
)
from .exceptions import (
    InvalidSequenceError,
    LengthError,
    NoDigitError,
    NoLowerAlphaError,
    NoSpecialCharacterError,
    NoUpperAlphaError,
)

_REPEATING_SYMBOLS_RE = re.compile(REGEXP_REPEATING_SYMBOLS, re.DOTALL)


def is_valid_length(password: str) -> bool:
    """Validate minimum password length.

    :raises LengthError: password is shorter than 6 characters
    """
    if len(password) < MIN_LENGTH:
        raise LengthError
    return True


def has_upper_alpha(password: str) -> bool:
    """Validate password contains an uppercase latin letter.

    :raises NoUpperAlphaError: no character in ``A-Z``
    """
    if not re.search(REGEXP_UPPERCASE_LETTERS, password):
        raise NoUpperAlphaError
    return True


def has_lower_alpha(password: str) -> bool:
    """Validate password contains a lowercase latin letter.

    :raises NoLowerAlphaError: no character in ``a-z``
    """
    if not re.search(REGEXP_LOWERCASE_LETTERS, password):
        raise NoLowerAlphaError
    return True


def has_digit(password: str) -> bool:
    """Validate password contains a digit.

    :raises NoDigitError: no character in ``0-9``
    """
    if not re.search(REGEXP_DIGITS, password):
        raise NoDigitError
    return True


def has_special_char(password: str) -> bool:
    """Validate password contains a special symbol.

    Special symbols are defined as non-alphanumeric characters.

    :raises NoSpecialCharacterError: every character is ``[a-zA-Z0-9]``
    """
    if not re.search(REGEXP_SPECIAL_SYMBOLS, password):
        raise NoSpecialCharacterError
    return True


def no_same_char_in_sequence(password: str) -> bool:
    """Validate there are no three same characters in a row.

    :raises InvalidSequenceError: e.g. ``aaa`` anywhere in the password
    """
    if _REPEATING_SYMBOLS_RE.search(password):
        raise InvalidSequenceError
    return True


def has_between_six_and_nine_chars(password: str) -> bool:
    """Check password length is in the weak range, bounds included."""
    return WEAK_MIN_LENGTH <= len(password) <= WEAK_MAX_LENGTH
