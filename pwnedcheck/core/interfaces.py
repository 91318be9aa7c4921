# pwnedcheck/core/interfaces.py
"""
Capability sets exposed by the lookup engines.

PasswordChecker satisfies PwnedClient and AsyncPasswordChecker satisfies
AsyncPwnedClient; callers that only need one calling convention can type
against these instead of a concrete class.
"""

from typing import Dict, Protocol


class PwnedClient(Protocol):
    """Blocking breach lookups."""

    def get_matches_raw(self, hashed_password: str) -> str:
        """Raw range body for the prefix of hashed_password."""

    def get_matches(self, hashed_password: str) -> Dict[str, int]:
        """Suffix -> count mapping for the prefix of hashed_password."""

    def is_compromised(self, password: str, is_hashed: bool = False) -> bool:
        """Whether password appears in breach data."""

    def get_breach_count(self, password: str, is_hashed: bool = False) -> int:
        """How often password appears in breach data, 0 if never."""


class AsyncPwnedClient(Protocol):
    """Suspending breach lookups with the same semantics as PwnedClient."""

    async def get_matches_raw(self, hashed_password: str) -> str:
        """Raw range body for the prefix of hashed_password."""

    async def get_matches(self, hashed_password: str) -> Dict[str, int]:
        """Suffix -> count mapping for the prefix of hashed_password."""

    async def is_compromised(self, password: str, is_hashed: bool = False) -> bool:
        """Whether password appears in breach data."""

    async def get_breach_count(self, password: str, is_hashed: bool = False) -> int:
        """How often password appears in breach data, 0 if never."""
