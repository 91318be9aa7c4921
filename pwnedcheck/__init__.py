# pwnedcheck/__init__.py
"""
pwnedcheck - Pwned Passwords client using the k-anonymity range API.
"""

from .core.exceptions import (
    PwnedCheckError,
    InvalidInputError,
    TooShortError,
    TransportError,
    MalformedResponseError,
)
from .core.hashing import compute_hash, get_prefix, get_suffix
from .core.parser import parse_range_response
from .core.checker import PasswordChecker, AsyncPasswordChecker
from .core.interfaces import PwnedClient, AsyncPwnedClient

__version__ = "1.0.0"

__all__ = [
    "PwnedCheckError",
    "InvalidInputError",
    "TooShortError",
    "TransportError",
    "MalformedResponseError",
    "compute_hash",
    "get_prefix",
    "get_suffix",
    "parse_range_response",
    "PasswordChecker",
    "AsyncPasswordChecker",
    "PwnedClient",
    "AsyncPwnedClient",
]
