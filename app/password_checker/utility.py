"""Password checker utility functions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterable

from loguru import logger as loguru_logger

from .checks import has_between_six_and_nine_chars
from .exceptions import PasswordError, UnmatchedError, WeakPasswordError
from .validator import ValidationOutcome, default_validator

log = loguru_logger.bind(name="password_checker")

_validator = default_validator()


def compare_passwords(password: str, password_confirm: str) -> None:
    """Compare a password with its confirmation.

    :param str password: the first password
    :param str password_confirm: the password to confirm
    :raises UnmatchedError: passwords are not identical
    """
    if password != password_confirm:
        raise UnmatchedError


def compare_passwords_with_return(
    password: str,
    password_confirm: str,
) -> bool:
    """Compare a password with its confirmation, return the result."""
    return password == password_confirm


def is_valid_password(password: str) -> bool:
    """Validate the password against every rule.

    Rules run as: length, sequence, uppercase, lowercase, digit, special
    character. Only the first failure is raised.

    :param str password: password to check
    :raises PasswordError: subclass matching the first failed rule
    :return bool: True if the password is valid
    """
    return _validator.validate(password)


def check_password(password: str) -> ValidationOutcome:
    """Validate the password without raising."""
    return _validator.outcome(password)


def is_weak_password(password: str) -> bool:
    """Check if the password is weak.

    :param str password: password to check
    :raises WeakPasswordError: length is between 6 and 9 characters
    :return bool: False when the password is not weak
    """
    if has_between_six_and_nine_chars(password):
        raise WeakPasswordError
    return False


def get_invalid_passwords(passwords: Iterable[str]) -> list[str]:
    """Check passwords and describe the invalid ones.

    Valid passwords are skipped, so positions in the result do not match
    positions in ``passwords``.

    :param Iterable[str] passwords: passwords to check
    :return list[str]: ``"<password> <message>"`` per invalid password
    """
    invalid_passwords: list[str] = []
    for password in passwords:
        try:
            is_valid_password(password)
        except PasswordError as err:
            log.debug(f"Rejected password: {err.code.name}")
            invalid_passwords.append(f"{password} {err}")

    return invalid_passwords


def get_password_outcomes(
    passwords: Iterable[str],
) -> list[ValidationOutcome]:
    """Validate every password, keeping one outcome per input."""
    return [check_password(password) for password in passwords]
