"""
Resolution of the credentials and endpoint used for API calls.

Each value is looked up through an ordered list of sources, evaluated
lazily: the settings store first, then the environment, then (for the
base URL only) a fixed default.
"""

import os
from typing import Callable, Dict, Iterable, Optional

from biapi.errors import ConfigurationError
from biapi.settings import DEFAULT_BASE_URL, get_store

MIN_TOKEN_LENGTH = 20

MISSING_TOKEN_MESSAGE = (
    "Access token not configured. Set it with 'biapi config set accessToken <your-token>' "
    "or the BIAPI_ACCESS_TOKEN environment variable."
)


def _first_value(sources: Iterable[Callable[[], Optional[str]]]) -> Optional[str]:
    """Return the first non-empty value produced by the sources."""
    for source in sources:
        value = source()
        if value:
            return value
    return None


def _sources(key: str, env_var: str):
    return (
        lambda: get_store().get(key),
        lambda: os.getenv(env_var),
    )


def get_access_token() -> str:
    """Bearer token for API calls; raises ConfigurationError when unset."""
    token = _first_value(_sources("accessToken", "BIAPI_ACCESS_TOKEN"))
    if not token:
        raise ConfigurationError(MISSING_TOKEN_MESSAGE)
    return token


def get_base_url() -> str:
    """API base URL. Never fails."""
    return _first_value(
        (*_sources("baseUrl", "BIAPI_BASE_URL"), lambda: DEFAULT_BASE_URL)
    )


def get_client_credentials() -> Dict[str, Optional[str]]:
    """Client id and secret, each possibly None. Callers decide if they are required."""
    return {
        "clientId": _first_value(_sources("clientId", "BIAPI_CLIENT_ID")),
        "clientSecret": _first_value(_sources("clientSecret", "BIAPI_CLIENT_SECRET")),
    }


def validate_token_format(token) -> bool:
    """Loose sanity check: API tokens are long opaque strings."""
    return isinstance(token, str) and len(token) >= MIN_TOKEN_LENGTH
