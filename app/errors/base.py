"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class BaseDomainException(Exception):  # noqa N818
    """Base exception.

    Every concrete subclass must declare a ``code`` class attribute so the
    failure kind can be told apart without matching on messages.
    """

    code: IntEnum

    def __init_subclass__(cls) -> None:
        """Initialize subclass."""
        super().__init_subclass__()

        if not hasattr(cls, "code"):
            raise AttributeError("code must be set")

    def __repr__(self) -> str:
        """Return class name, code and message."""
        return f"{type(self).__name__}(code={self.code!r}, message={str(self)!r})"  # noqa: E501
