# pwnedcheck/core/hashing.py
"""
SHA-1 hashing and prefix/suffix partitioning for k-anonymity lookups.

Only the prefix is ever sent to the range endpoint; the suffix stays local.
"""

import hashlib
from typing import Tuple

from ..security.guards import PREFIX_LENGTH, ensure_hash_like, ensure_not_none
from ..utils.logger import get_logger

logger = get_logger(__name__)


def compute_hash(secret: str) -> str:
    """
    Hash a plain-text secret the way the range endpoint indexes it.

    Args:
        secret: Plain-text password (any length, including empty)

    Returns:
        str: 40-character uppercase hexadecimal SHA-1 digest
    """
    ensure_not_none(secret, "secret")
    return hashlib.sha1(secret.encode("utf-8")).hexdigest().upper()


def get_prefix(hash_value: str) -> str:
    """Return the first five characters of a hash."""
    ensure_hash_like(hash_value, "hash_value")
    return hash_value[:PREFIX_LENGTH]


def get_suffix(hash_value: str) -> str:
    """
    Return everything after the first five characters of a hash.

    A hash of exactly five characters has an empty suffix.
    """
    ensure_hash_like(hash_value, "hash_value")
    return hash_value[PREFIX_LENGTH:]


def split_hash(hash_value: str) -> Tuple[str, str]:
    """Return (prefix, suffix) for a hash."""
    return get_prefix(hash_value), get_suffix(hash_value)


def normalize_hash(hash_value: str, argument: str = "hashed_password") -> str:
    """
    Validate a caller-supplied hash and upper-case it.

    The service returns uppercase suffixes, so a lowercase hex digest would
    otherwise never match.
    """
    ensure_hash_like(hash_value, argument)
    return hash_value.upper()


def resolve_hash(password: str, is_hashed: bool = False) -> str:
    """
    Turn caller input into a hash ready for partitioning.

    Args:
        password: Plain-text password, or a SHA-1 hash when is_hashed is True
        is_hashed: Whether password is already hashed

    Returns:
        str: Uppercase hash
    """
    if is_hashed:
        return normalize_hash(password)

    ensure_not_none(password, "password")
    logger.debug("Hashing plain-text password")
    return compute_hash(password)
