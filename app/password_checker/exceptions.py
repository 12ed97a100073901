"""Password checker exceptions module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique

from errors import BaseDomainException

from .error_messages import ErrorMessages


@unique
class ErrorCodes(IntEnum):
    """Error codes, one per password failure kind."""

    BASE_ERROR = 0
    TOO_SHORT = 1
    NO_UPPER_ALPHA = 2
    NO_LOWER_ALPHA = 3
    NO_DIGIT = 4
    NO_SPECIAL_CHAR = 5
    REPEATED_SEQUENCE = 6
    MISMATCH = 7
    WEAK = 8

    @property
    def message(self) -> str:
        """Fixed human-readable message of the failure kind."""
        return _MESSAGES[self]


_MESSAGES: dict[ErrorCodes, str] = {
    ErrorCodes.BASE_ERROR: ErrorMessages.BASE,
    ErrorCodes.TOO_SHORT: ErrorMessages.TOO_SHORT,
    ErrorCodes.NO_UPPER_ALPHA: ErrorMessages.NO_UPPER_ALPHA,
    ErrorCodes.NO_LOWER_ALPHA: ErrorMessages.NO_LOWER_ALPHA,
    ErrorCodes.NO_DIGIT: ErrorMessages.NO_DIGIT,
    ErrorCodes.NO_SPECIAL_CHAR: ErrorMessages.NO_SPECIAL_CHAR,
    ErrorCodes.REPEATED_SEQUENCE: ErrorMessages.REPEATED_SEQUENCE,
    ErrorCodes.MISMATCH: ErrorMessages.MISMATCH,
    ErrorCodes.WEAK: ErrorMessages.WEAK,
}


class PasswordError(BaseDomainException):
    """Base exception class for password checker errors.

    Raised without arguments, an error carries the fixed message of its
    ``code``.
    """

    code: ErrorCodes = ErrorCodes.BASE_ERROR

    def __init__(self, message: str | None = None) -> None:
        """Create error with the fixed message of its kind by default."""
        super().__init__(self.code.message if message is None else message)

    @property
    def message(self) -> str:
        """Error message."""
        return str(self)


class LengthError(PasswordError):
    """Exception raised when a password is too short."""

    code = ErrorCodes.TOO_SHORT


class NoUpperAlphaError(PasswordError):
    """Exception raised when a password has no uppercase letter."""

    code = ErrorCodes.NO_UPPER_ALPHA


class NoLowerAlphaError(PasswordError):
    """Exception raised when a password has no lowercase letter."""

    code = ErrorCodes.NO_LOWER_ALPHA


class NoDigitError(PasswordError):
    """Exception raised when a password has no digit."""

    code = ErrorCodes.NO_DIGIT


class NoSpecialCharacterError(PasswordError):
    """Exception raised when a password has no special character."""

    code = ErrorCodes.NO_SPECIAL_CHAR


class InvalidSequenceError(PasswordError):
    """Exception raised on three same characters in a row."""

    code = ErrorCodes.REPEATED_SEQUENCE


class UnmatchedError(PasswordError):
    """Exception raised when a password and its confirmation differ."""

    code = ErrorCodes.MISMATCH


class WeakPasswordError(PasswordError):
    """Exception raised when a valid password is shorter than 10 chars."""

    code = ErrorCodes.WEAK
