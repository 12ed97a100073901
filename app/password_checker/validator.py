"""Password Validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Callable, Self, TypeAlias

from . import checks
from .exceptions import ErrorCodes, PasswordError

_CheckType: TypeAlias = Callable[[str], bool]


@dataclass(frozen=True)
class _Checker:
    """Checker dataclass."""

    name: str
    check: _CheckType


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one password.

    A successful outcome has neither ``code`` nor ``message``.
    """

    password: str
    code: ErrorCodes | None = None
    message: str | None = None

    @property
    def is_valid(self) -> bool:
        """Whether every rule passed."""
        return self.code is None

    @classmethod
    def from_error(cls, password: str, error: PasswordError) -> Self:
        """Build failed outcome from a raised rule error."""
        return cls(password=password, code=error.code, message=error.message)


class _PasswordValidator:
    """Builder for an ordered, short-circuiting password rule chain.

    Rules run in the order they were added; the first failing rule raises
    its own error and the remaining rules are skipped.

    :Example:
        .. code-block:: python

            validator = _PasswordValidator().valid_length().has_digit()
            validator.validate("abc")  # raises LengthError
            validator.validate("abcdef")  # raises NoDigitError
            assert validator.validate("abcde1")
    """

    def __init__(self) -> None:
        """Initialize a validator with no rules."""
        self.__checkers: list[_Checker] = []

    @property
    def rule_names(self) -> list[str]:
        """Names of registered rules in evaluation order."""
        return [checker.name for checker in self.__checkers]

    def __add_checker(self, name: str, check: _CheckType) -> Self:
        self.__checkers.append(_Checker(name=name, check=check))
        return self

    def validate(self, password: str) -> bool:
        """Validate the given password against the configured rules.

        :param str password: Password to validate.
        :raises PasswordError: subclass of the first failing rule.
        :return: bool.
        """
        for checker in self.__checkers:
            checker.check(password)

        return True

    def outcome(self, password: str) -> ValidationOutcome:
        """Validate without raising.

        :param str password: Password to validate.
        :return: ValidationOutcome.
        """
        try:
            self.validate(password)
        except PasswordError as err:
            return ValidationOutcome.from_error(password, err)

        return ValidationOutcome(password=password)

    def valid_length(self) -> Self:
        """Require at least 6 characters."""
        return self.__add_checker("length", checks.is_valid_length)

    def no_same_char_in_sequence(self) -> Self:
        """Forbid three same characters in a row."""
        return self.__add_checker("sequence", checks.no_same_char_in_sequence)

    def has_upper_alpha(self) -> Self:
        """Require an uppercase letter."""
        return self.__add_checker("upper", checks.has_upper_alpha)

    def has_lower_alpha(self) -> Self:
        """Require a lowercase letter."""
        return self.__add_checker("lower", checks.has_lower_alpha)

    def has_digit(self) -> Self:
        """Require a digit."""
        return self.__add_checker("digit", checks.has_digit)

    def has_special_char(self) -> Self:
        """Require a special character."""
        return self.__add_checker("special", checks.has_special_char)


def default_validator() -> _PasswordValidator:
    """Build the fixed rule chain used by the public checker functions."""
    return (
        _PasswordValidator()
        .valid_length()
        .no_same_char_in_sequence()
        .has_upper_alpha()
        .has_lower_alpha()
        .has_digit()
        .has_special_char()
    )  # fmt: skip
