"""
HTTP request core shared by every command.

One call issues exactly one request: the bearer token and base URL are
resolved first (so a missing token fails before any I/O), the response
is decoded as JSON (plain text bodies are returned as-is), and failures
are normalized into ``ApiError`` (the server answered with a non-2xx
status) or ``NetworkError`` (no usable answer: connection, timeout,
redirect loop or undecodable body). Nothing is retried.
"""

from typing import Any, Dict, Optional

import httpx

from biapi.credentials import get_access_token, get_base_url
from biapi.errors import ApiError, NetworkError
from biapi.logger import get_logger

logger = get_logger(__name__)

BODY_METHODS = ("POST", "PUT")


def _new_client() -> httpx.Client:
    """Create the HTTP client used for a single request."""
    return httpx.Client()


def build_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}{path}"


def build_query(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop unset parameters and render booleans the way the API expects."""
    query = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[key] = value
    return query


def build_headers(token: str, method: str) -> Dict[str, str]:
    headers = {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
    }
    if method in BODY_METHODS:
        headers["Content-Type"] = "application/json"
    return headers


def _decode_body(response: httpx.Response) -> Any:
    """Parsed JSON when possible, raw text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        logger.debug(f"Non-JSON response body ({response.headers.get('content-type', 'unknown')}), returning text")
        return response.text


def request(
    method: str,
    path: str,
    params: Optional[Dict[str, Any]] = None,
    body: Any = None,
    client: Optional[httpx.Client] = None,
) -> Any:
    """Send one request to the API and return the decoded response body.

    Args:
        method: HTTP method (GET, POST, PUT, DELETE)
        path: Resource path relative to the base URL, e.g. ``/users/me``
        params: Query parameters; ``None`` values are omitted
        body: JSON body, sent for POST and PUT only
        client: Optional pre-built client (its transport is reused, it is not closed)

    Raises:
        ConfigurationError: No access token is configured
        ApiError: The API answered with a non-2xx status
        NetworkError: No usable response (transport failure, redirect loop, undecodable body)
    """
    method = method.upper()
    token = get_access_token()
    url = build_url(get_base_url(), path)

    kwargs = {"headers": build_headers(token, method)}
    query = build_query(params)
    if query:
        kwargs["params"] = query
    if method in BODY_METHODS:
        kwargs["json"] = body if body is not None else {}

    logger.debug(f"{method} {url} params={query}")
    try:
        if client is not None:
            response = client.request(method, url, **kwargs)
        else:
            with _new_client() as http_client:
                response = http_client.request(method, url, **kwargs)
    except httpx.RequestError as e:
        logger.debug(f"{method} {url} failed: {type(e).__name__}: {e}")
        raise NetworkError(f"Request to {url} failed: {str(e) or type(e).__name__}") from e

    logger.debug(f"{method} {url} -> {response.status_code}")
    data = _decode_body(response)
    if not response.is_success:
        raise ApiError(response.status_code, data)
    return data


def http_get(path: str, params: Optional[Dict[str, Any]] = None, client: Optional[httpx.Client] = None) -> Any:
    """GET a resource, passing ``params`` as the query string."""
    return request("GET", path, params=params, client=client)


def http_post(path: str, body: Any = None, client: Optional[httpx.Client] = None) -> Any:
    """POST a JSON body."""
    return request("POST", path, body=body, client=client)


def http_put(path: str, body: Any = None, client: Optional[httpx.Client] = None) -> Any:
    """PUT a JSON body."""
    return request("PUT", path, body=body, client=client)


def http_delete(path: str, client: Optional[httpx.Client] = None) -> Any:
    """DELETE a resource. Returns None when the API answers with an empty body."""
    return request("DELETE", path, client=client)
