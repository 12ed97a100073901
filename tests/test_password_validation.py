"""Test password checker rules.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Callable

import pytest

from password_checker import checks
from password_checker.exceptions import (
    InvalidSequenceError,
    LengthError,
    NoDigitError,
    NoLowerAlphaError,
    NoSpecialCharacterError,
    NoUpperAlphaError,
    PasswordError,
)


def test_is_valid_length() -> None:
    """Test minimum length rule."""
    assert checks.is_valid_length("abcdef")
    assert checks.is_valid_length("abcdefghijkl")

    for password in ("", "a", "abcde"):
        with pytest.raises(
            LengthError,
            match="The password must be at least 6 characters long",
        ):
            checks.is_valid_length(password)


def test_has_upper_alpha() -> None:
    """Test uppercase letter rule."""
    assert checks.has_upper_alpha("abcDef")
    assert checks.has_upper_alpha("Z")

    with pytest.raises(NoUpperAlphaError):
        checks.has_upper_alpha("abcdef1!")

    with pytest.raises(NoUpperAlphaError):
        checks.has_upper_alpha("ÄÖÜÉÈ")


def test_has_lower_alpha() -> None:
    """Test lowercase letter rule."""
    assert checks.has_lower_alpha("ABCdEF")

    with pytest.raises(
        NoLowerAlphaError,
        match="at least one lowercase alphabetic character",
    ):
        checks.has_lower_alpha("ABCDEF1!")


def test_has_digit() -> None:
    """Test digit rule."""
    assert checks.has_digit("abc1")
    assert checks.has_digit("0")

    with pytest.raises(NoDigitError):
        checks.has_digit("Hello!")


def test_has_special_char() -> None:
    """Test special character rule."""
    assert checks.has_special_char("Hello1!")
    assert checks.has_special_char("Hello 1")
    assert checks.has_special_char("Hello_1")
    assert checks.has_special_char("Hellö1")

    with pytest.raises(NoSpecialCharacterError):
        checks.has_special_char("Hello1")

    with pytest.raises(NoSpecialCharacterError):
        checks.has_special_char("")


def test_no_same_char_in_sequence() -> None:
    """Test repeating characters rule."""
    assert checks.no_same_char_in_sequence("aabbcc")
    assert checks.no_same_char_in_sequence("aAa")
    assert checks.no_same_char_in_sequence("")

    for password in ("aaa", "xyz111", "ab!!!cd", "\n\n\n", "aaaa"):
        with pytest.raises(
            InvalidSequenceError,
            match="cannot contain more than two of the same character",
        ):
            checks.no_same_char_in_sequence(password)


def test_has_between_six_and_nine_chars() -> None:
    """Test weak length range."""
    assert not checks.has_between_six_and_nine_chars("abcde")
    assert checks.has_between_six_and_nine_chars("abcdef")
    assert checks.has_between_six_and_nine_chars("abcdefghi")
    assert not checks.has_between_six_and_nine_chars("abcdefghij")


@pytest.mark.parametrize(
    "check",
    [
        checks.is_valid_length,
        checks.has_upper_alpha,
        checks.has_lower_alpha,
        checks.has_digit,
        checks.has_special_char,
        checks.no_same_char_in_sequence,
    ],
)
def test_checks_are_idempotent(check: Callable[[str], bool]) -> None:
    """Test every rule gives the same answer twice."""
    for password in ("Hello1!", "abc", "aaabbb"):
        results: list[object] = []
        for _ in range(2):
            try:
                results.append(check(password))
            except PasswordError as err:
                results.append((type(err), str(err)))
        assert results[0] == results[1]
