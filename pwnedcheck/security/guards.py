# pwnedcheck/security/guards.py
"""
Argument guards shared by the hashing helpers and both lookup engines.
Every guard raises immediately so no request is ever built from bad input.
"""

import re
from typing import Any

from ..core.exceptions import InvalidInputError, TooShortError

# Number of hash characters disclosed to the range endpoint
PREFIX_LENGTH = 5

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")


def ensure_not_none(value: Any, argument: str) -> str:
    """
    Reject absent (None) or non-string arguments.

    Args:
        value: Value to check
        argument: Argument name used in the error message

    Returns:
        str: The value, unchanged
    """
    if value is None:
        raise InvalidInputError(argument)

    if not isinstance(value, str):
        raise InvalidInputError(
            argument, f"{argument} must be a string, not {type(value).__name__}"
        )

    return value


def ensure_min_length(value: str, min_length: int, argument: str) -> str:
    """Reject strings shorter than min_length."""
    if len(value) < min_length:
        raise TooShortError(argument, min_length, len(value))
    return value


def ensure_hash_like(value: Any, argument: str) -> str:
    """Combined guard for anything a prefix or suffix is taken from."""
    ensure_not_none(value, argument)
    return ensure_min_length(value, PREFIX_LENGTH, argument)


def ensure_hex(value: str, argument: str) -> str:
    """Reject strings containing anything other than hexadecimal digits."""
    # fullmatch: "$" would let a trailing newline through
    if not _HEX_PATTERN.fullmatch(value):
        raise InvalidInputError(argument, f"{argument} must be hexadecimal")
    return value
