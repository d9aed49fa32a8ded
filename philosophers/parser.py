"""Validation of the command-line numbers that configure a simulation."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[\t\n\x0b\x0c\r ]*\+?([0-9]+)")


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot configure a simulation."""


def parse_number(text: str) -> int:
    """Parse a non-negative decimal integer that fits in a signed 32-bit int.

    Leading whitespace and a single leading ``+`` are accepted; anything else
    that is not a digit, or a value above ``INT_MAX``, is rejected.
    """
    match = _NUMBER.fullmatch(text) if text else None
    if match is None:
        raise ArgumentError(f"not a valid number: {text!r}")
    value = int(match.group(1))
    if value > INT_MAX:
        raise ArgumentError(f"number out of range: {text!r}")
    return value


def validate_arguments(args: Sequence[str]) -> list[int]:
    """Check the 4 or 5 simulation arguments and return them as integers.

    Every argument must be a strictly positive number.
    """
    if not 4 <= len(args) <= 5:
        raise ArgumentError("Error : expected 4 or 5 arguments")
    values = []
    for arg in args:
        try:
            value = parse_number(arg)
        except ArgumentError:
            raise ArgumentError("Error: invalid argument value") from None
        if value <= 0:
            raise ArgumentError("Error: invalid argument value")
        values.append(value)
    return values