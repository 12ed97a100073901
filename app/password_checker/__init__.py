"""Password checker module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from loguru import logger as loguru_logger

from .error_messages import ErrorMessages
from .exceptions import (
    ErrorCodes,
    InvalidSequenceError,
    LengthError,
    NoDigitError,
    NoLowerAlphaError,
    NoSpecialCharacterError,
    NoUpperAlphaError,
    PasswordError,
    UnmatchedError,
    WeakPasswordError,
)
from .utility import (
    check_password,
    compare_passwords,
    compare_passwords_with_return,
    get_invalid_passwords,
    get_password_outcomes,
    is_valid_password,
    is_weak_password,
)
from .validator import ValidationOutcome

loguru_logger.disable(__name__)

__all__ = [
    "ErrorCodes",
    "ErrorMessages",
    "InvalidSequenceError",
    "LengthError",
    "NoDigitError",
    "NoLowerAlphaError",
    "NoSpecialCharacterError",
    "NoUpperAlphaError",
    "PasswordError",
    "UnmatchedError",
    "ValidationOutcome",
    "WeakPasswordError",
    "check_password",
    "compare_passwords",
    "compare_passwords_with_return",
    "get_invalid_passwords",
    "get_password_outcomes",
    "is_valid_password",
    "is_weak_password",
]
