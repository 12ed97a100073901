"""Error Messages for password checker rules.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""


class ErrorMessages:
    """Error messages for password checker rules."""

    BASE = "The password is invalid"

    TOO_SHORT = "The password must be at least 6 characters long"

    NO_UPPER_ALPHA = "The password must contain at least one uppercase alphabetic character"  # fmt: skip # noqa: E501
    NO_LOWER_ALPHA = "The password must contain at least one lowercase alphabetic character"  # fmt: skip # noqa: E501

    NO_DIGIT = "The password must contain at least one digit"
    NO_SPECIAL_CHAR = "The password must contain at least one special character"  # fmt: skip # noqa: E501

    REPEATED_SEQUENCE = "The password cannot contain more than two of the same character in sequence"  # fmt: skip # noqa: E501

    MISMATCH = "Passwords do not match"
    WEAK = "The password is OK but weak - it contains fewer than 10 characters."  # fmt: skip # noqa: E501
