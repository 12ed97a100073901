"""Password checker command line.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
import sys
from contextlib import nullcontext
from typing import ContextManager, Iterator, Sequence, TextIO

from loguru import logger

from .exceptions import PasswordError, WeakPasswordError
from .logger import setup_logger
from .settings import Settings
from .utility import (
    compare_passwords,
    get_invalid_passwords,
    is_valid_password,
    is_weak_password,
)

log = logger.bind(name="password_checker")


def _read_passwords(stream: TextIO) -> Iterator[str]:
    for line in stream:
        password = line.rstrip("\r\n")
        if password:
            yield password


def _open_passwords(path: str) -> ContextManager[TextIO]:
    if path == "-":
        return nullcontext(sys.stdin)
    return open(path, encoding="utf-8")


def _check(args: argparse.Namespace) -> int:
    try:
        if args.confirm is not None:
            compare_passwords(args.password, args.confirm)
        is_valid_password(args.password)
    except PasswordError as err:
        log.debug(f"Check failed: {err.code.name}")
        print(err, file=sys.stderr)
        return 1

    print("Password is valid")

    try:
        is_weak_password(args.password)
    except WeakPasswordError as err:
        print(err)

    return 0


def _batch(args: argparse.Namespace) -> int:
    with _open_passwords(args.file) as stream:
        report = get_invalid_passwords(_read_passwords(stream))

    for line in report:
        print(line)

    log.info(f"{len(report)} invalid password(s) found")
    return 1 if report else 0


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="password-checker",
        description="Check passwords against the password rules",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check one password")
    check.add_argument("password", help="Password to check")
    check.add_argument(
        "--confirm",
        default=None,
        help="Confirmation that must match the password",
    )
    check.set_defaults(handler=_check)

    batch = subparsers.add_parser(
        "batch",
        help="Report invalid passwords, one password per line",
    )
    batch.add_argument(
        "file",
        nargs="?",
        default="-",
        help="File with passwords, stdin by default",
    )
    batch.set_defaults(handler=_batch)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run checker, return exit code."""
    settings = Settings.from_os()
    setup_logger(settings)

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.handler(args)
    except (OSError, UnicodeDecodeError) as err:
        log.debug(f"Can not read passwords: {err}")
        parser.error(f"can not read passwords: {err}")


if __name__ == "__main__":
    sys.exit(main())
