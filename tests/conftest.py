"""
Shared fixtures: canned range bodies and mocked transports for both engines.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pwnedcheck.utils.config import Config

PASSWORD = "password123"
PASSWORD_HASH = "CBFDAC6008F9CAB4083784CBD1874F76618D2A97"
PASSWORD_PREFIX = "CBFDA"
PASSWORD_SUFFIX = "C6008F9CAB4083784CBD1874F76618D2A97"
PASSWORD_COUNT = 2254650

# Shape of a real /range/CBFDA response (CRLF line endings)
RANGE_BODY = (
    "0018A45C4D1DEF81644B54AB7F969B88D65:100\r\n"
    f"{PASSWORD_SUFFIX}:{PASSWORD_COUNT}\r\n"
    "1E4C9B93F3F0682250B6CF8331B7EE68FD8:5000\r\n"
)

RANGE_URL = f"https://api.pwnedpasswords.com/range/{PASSWORD_PREFIX}"


def make_response(text: str = RANGE_BODY, status_code: int = 200) -> MagicMock:
    """Stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


def make_async_session(text: str = RANGE_BODY, status: int = 200, error: Exception = None) -> MagicMock:
    """Stand-in for aiohttp.ClientSession whose get() is an async context manager."""
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=text)

    context = MagicMock()
    if error is not None:
        context.__aenter__ = AsyncMock(side_effect=error)
    else:
        context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=None)

    session = MagicMock()
    session.get = MagicMock(return_value=context)
    session.close = AsyncMock()
    return session


@pytest.fixture
def config(monkeypatch):
    """Configuration built from defaults only."""
    for key in ("PWNEDCHECK_API_URL", "PWNEDCHECK_API_VERSION", "PWNEDCHECK_USER_AGENT",
                "PWNEDCHECK_TIMEOUT", "PWNEDCHECK_ADD_PADDING", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return Config()


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.get.return_value = make_response()
    return session


@pytest.fixture
def async_session():
    return make_async_session()
