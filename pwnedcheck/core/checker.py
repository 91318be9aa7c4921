# pwnedcheck/core/checker.py
"""
Pwned Passwords range API clients using the k-anonymity model.

The password (or its full hash) never leaves the process: only the first five
characters of the SHA-1 hash are sent, and the returned suffixes are matched
locally. PasswordChecker blocks on requests; AsyncPasswordChecker suspends on
aiohttp. Both share validation, URL building, parsing and matching through
RangeLookupBase so their behavior is identical.
"""

import asyncio
import time
from typing import Callable, Dict, Optional, Tuple

import aiohttp
import requests

from .exceptions import TransportError
from .hashing import compute_hash, get_prefix, get_suffix, normalize_hash, resolve_hash
from .parser import parse_range_response
from ..security.guards import ensure_hex
from ..utils.config import Config, get_config
from ..utils.logger import get_logger, log_breach_check, log_range_request

logger = get_logger(__name__)


def create_session(config: Config) -> requests.Session:
    """Default transport factory for PasswordChecker."""
    session = requests.Session()
    session.headers.update(config.get_request_headers())
    return session


def create_async_session(config: Config) -> aiohttp.ClientSession:
    """Default transport factory for AsyncPasswordChecker. Needs a running loop."""
    return aiohttp.ClientSession(
        headers=config.get_request_headers(),
        timeout=aiohttp.ClientTimeout(total=config.timeout),
    )


class RangeLookupBase:
    """
    Transport-independent half of a range lookup.

    Subclasses only supply the request itself; every guard here runs before
    a request is attempted.
    """

    compute_hash = staticmethod(compute_hash)
    get_prefix = staticmethod(get_prefix)
    get_suffix = staticmethod(get_suffix)

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self.api_url = self.config.api_url
        self.timeout = self.config.timeout
        self.headers = self.config.get_request_headers()

    def _range_prefix(self, hashed_password: str) -> str:
        """Validate a (full or partial) hash and return the prefix to query."""
        prefix = get_prefix(normalize_hash(hashed_password))
        return ensure_hex(prefix, "hashed_password")

    def _prepare_lookup(self, password: str, is_hashed: bool) -> Tuple[str, str]:
        """Resolve caller input to (hash, suffix), rejecting anything unqueryable."""
        hash_value = resolve_hash(password, is_hashed)
        self._range_prefix(hash_value)
        return hash_value, get_suffix(hash_value)

    def _build_url(self, prefix: str) -> str:
        return f"{self.api_url}{prefix}"

    @staticmethod
    def _count_for(matches: Dict[str, int], suffix: str) -> int:
        """Breach count for suffix, 0 when the service did not return it."""
        return max(matches.get(suffix, 0), 0)

    def _finish_check(self, hash_value: str, count: int, source: str) -> None:
        log_breach_check(hash_value[:5], count > 0, source)

    def _transport_failed(self, prefix: str, start_time: float, error: Exception) -> TransportError:
        duration_ms = (time.time() - start_time) * 1000
        log_range_request(prefix, "transport_error", duration_ms)
        logger.error(f"Range request for prefix {prefix} failed: {error}")
        return TransportError(f"Range request for prefix {prefix} failed: {error}")

    def _check_status(self, prefix: str, status: int, start_time: float) -> None:
        duration_ms = (time.time() - start_time) * 1000

        if status != 200:
            log_range_request(prefix, f"http_{status}", duration_ms)
            raise TransportError(
                f"Range API returned HTTP {status} for prefix {prefix}", status_code=status
            )

        log_range_request(prefix, "success", duration_ms)


class PasswordChecker(RangeLookupBase):
    """
    Blocking client for the Pwned Passwords range API.

    The session is reusable and may be shared between threads issuing
    independent lookups. A session passed in is never closed by the checker.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        config: Optional[Config] = None,
        session_factory: Callable[[Config], requests.Session] = create_session,
    ):
        super().__init__(config)
        self._owns_session = session is None
        self.session = session if session is not None else session_factory(self.config)

        logger.debug(f"PasswordChecker initialized with API: {self.api_url}")

    def __enter__(self) -> "PasswordChecker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this checker created it."""
        if self._owns_session:
            self.session.close()

    def get_matches_raw(self, hashed_password: str) -> str:
        """
        Query the range endpoint for the prefix of a hash.

        Only the first five characters of hashed_password are used, so a
        bare prefix works as well as a full hash.

        Args:
            hashed_password: SHA-1 hash (or just its first five characters)

        Returns:
            str: Response body, verbatim
        """
        prefix = self._range_prefix(hashed_password)
        return self._fetch_range(prefix)

    def get_matches(self, hashed_password: str) -> Dict[str, int]:
        """
        Query the range endpoint and parse the result.

        Returns:
            Dict[str, int]: Suffix -> breach count for every hash sharing the prefix
        """
        return parse_range_response(self.get_matches_raw(hashed_password))

    def is_compromised(self, password: str, is_hashed: bool = False) -> bool:
        """
        Check whether a password appears in breach data.

        Args:
            password: Plain-text password, or a SHA-1 hash when is_hashed is True
            is_hashed: Whether password is already hashed

        Returns:
            bool: True if the suffix is listed with a positive count
        """
        hash_value, suffix = self._prepare_lookup(password, is_hashed)
        count = self._count_for(self.get_matches(hash_value), suffix)
        self._finish_check(hash_value, count, "is_compromised")
        return count > 0

    def is_compromised_plain_text(self, password: str) -> bool:
        return self.is_compromised(password, is_hashed=False)

    def is_compromised_hashed(self, hashed_password: str) -> bool:
        return self.is_compromised(hashed_password, is_hashed=True)

    def get_breach_count(self, password: str, is_hashed: bool = False) -> int:
        """
        Count how often a password appears in breach data.

        Returns:
            int: Breach count, 0 if the password was not found
        """
        hash_value, suffix = self._prepare_lookup(password, is_hashed)
        count = self._count_for(self.get_matches(hash_value), suffix)
        self._finish_check(hash_value, count, "breach_count")
        return count

    def get_breach_count_plain_text(self, password: str) -> int:
        return self.get_breach_count(password, is_hashed=False)

    def get_breach_count_hashed(self, hashed_password: str) -> int:
        return self.get_breach_count(hashed_password, is_hashed=True)

    def _fetch_range(self, prefix: str) -> str:
        url = self._build_url(prefix)
        start_time = time.time()

        logger.debug(f"Making range request for prefix: {prefix}")

        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise self._transport_failed(prefix, start_time, e) from e

        self._check_status(prefix, response.status_code, start_time)
        return response.text


class AsyncPasswordChecker(RangeLookupBase):
    """
    Asynchronous client for the Pwned Passwords range API.

    Same operations and validation order as PasswordChecker: every guard
    runs before the first await. The default session is created lazily
    inside the running event loop.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        config: Optional[Config] = None,
        session_factory: Callable[[Config], aiohttp.ClientSession] = create_async_session,
    ):
        super().__init__(config)
        self._session = session
        self._owns_session = session is None
        self._session_factory = session_factory

        logger.debug(f"AsyncPasswordChecker initialized with API: {self.api_url}")

    async def __aenter__(self) -> "AsyncPasswordChecker":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the session if this checker created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = self._session_factory(self.config)
        return self._session

    async def get_matches_raw(self, hashed_password: str) -> str:
        """Async counterpart of PasswordChecker.get_matches_raw."""
        prefix = self._range_prefix(hashed_password)
        return await self._fetch_range(prefix)

    async def get_matches(self, hashed_password: str) -> Dict[str, int]:
        """Async counterpart of PasswordChecker.get_matches."""
        return parse_range_response(await self.get_matches_raw(hashed_password))

    async def is_compromised(self, password: str, is_hashed: bool = False) -> bool:
        """Async counterpart of PasswordChecker.is_compromised."""
        hash_value, suffix = self._prepare_lookup(password, is_hashed)
        count = self._count_for(await self.get_matches(hash_value), suffix)
        self._finish_check(hash_value, count, "is_compromised")
        return count > 0

    async def is_compromised_plain_text(self, password: str) -> bool:
        return await self.is_compromised(password, is_hashed=False)

    async def is_compromised_hashed(self, hashed_password: str) -> bool:
        return await self.is_compromised(hashed_password, is_hashed=True)

    async def get_breach_count(self, password: str, is_hashed: bool = False) -> int:
        """Async counterpart of PasswordChecker.get_breach_count."""
        hash_value, suffix = self._prepare_lookup(password, is_hashed)
        count = self._count_for(await self.get_matches(hash_value), suffix)
        self._finish_check(hash_value, count, "breach_count")
        return count

    async def get_breach_count_plain_text(self, password: str) -> int:
        return await self.get_breach_count(password, is_hashed=False)

    async def get_breach_count_hashed(self, hashed_password: str) -> int:
        return await self.get_breach_count(hashed_password, is_hashed=True)

    async def _fetch_range(self, prefix: str) -> str:
        url = self._build_url(prefix)
        session = self._get_session()
        start_time = time.time()

        logger.debug(f"Making async range request for prefix: {prefix}")

        try:
            async with session.get(
                url,
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                self._check_status(prefix, response.status, start_time)
                return await response.text()
        except asyncio.TimeoutError as e:
            raise self._transport_failed(prefix, start_time, e) from e
        except aiohttp.ClientError as e:
            raise self._transport_failed(prefix, start_time, e) from e
