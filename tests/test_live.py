"""
Scenarios against the real Pwned Passwords API.
Skipped unless PWNEDCHECK_LIVE_TESTS=1.
"""

import os
import uuid

import pytest

from pwnedcheck.core.checker import AsyncPasswordChecker, PasswordChecker

from conftest import PASSWORD, PASSWORD_HASH, PASSWORD_PREFIX, PASSWORD_SUFFIX

pytestmark = [
    pytest.mark.network,
    pytest.mark.skipif(
        os.getenv("PWNEDCHECK_LIVE_TESTS") != "1",
        reason="set PWNEDCHECK_LIVE_TESTS=1 to query the live API",
    ),
]


@pytest.fixture
def checker():
    with PasswordChecker() as checker:
        yield checker


def test_breached_password_is_in_range(checker):
    matches = checker.get_matches(PASSWORD_PREFIX)
    assert matches[PASSWORD_SUFFIX] > 0


def test_complete_hash_is_in_range(checker):
    assert PASSWORD_SUFFIX in checker.get_matches(PASSWORD_HASH)


def test_random_password_is_not_in_range(checker):
    hashed = checker.compute_hash(str(uuid.uuid4()))
    assert checker.get_suffix(hashed) not in checker.get_matches(hashed)


def test_breached_password(checker):
    assert checker.is_compromised(PASSWORD) is True
    assert checker.get_breach_count(PASSWORD) > 0


def test_random_password(checker):
    password = str(uuid.uuid4())
    assert checker.is_compromised(password) is False
    assert checker.get_breach_count(password) == 0


@pytest.mark.asyncio
async def test_async_breached_password():
    async with AsyncPasswordChecker() as checker:
        assert await checker.is_compromised(PASSWORD) is True
        assert await checker.get_breach_count_hashed(PASSWORD_HASH) > 0
