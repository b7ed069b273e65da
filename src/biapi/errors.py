"""
Error taxonomy for the CLI.

Every failure a command can report derives from ``BiapiError`` and
carries a ``kind`` discriminant, so the command boundary can catch one
type and still tell the cases apart.
"""

from typing import Any, Optional

# Keys probed, in order, for a human-readable message in an error body
DETAIL_KEYS = ("description", "message", "error_description", "error", "code")
MAX_TEXT_DETAIL = 200


class BiapiError(Exception):
    """Base class for all errors reported by biapi commands."""

    kind = "error"


class ConfigurationError(BiapiError):
    """Local settings are missing or invalid. Never reaches the network."""

    kind = "configuration"


class InputError(BiapiError):
    """A user-supplied file or flag could not be used."""

    kind = "input"


class NetworkError(BiapiError):
    """The request did not produce any HTTP response."""

    kind = "network"


class ApiError(BiapiError):
    """The API answered with a non-2xx status."""

    kind = "api"

    def __init__(self, status_code: int, body: Any = None):
        self.status_code = status_code
        self.body = body
        super().__init__(self._build_message())

    @property
    def detail(self) -> Optional[str]:
        """Best-effort message extracted from the response body."""
        if isinstance(self.body, dict):
            for key in DETAIL_KEYS:
                value = self.body.get(key)
                if isinstance(value, str) and value:
                    return value
            return None
        if isinstance(self.body, str) and self.body.strip():
            text = self.body.strip()
            if len(text) > MAX_TEXT_DETAIL:
                text = text[:MAX_TEXT_DETAIL] + "..."
            return text
        return None

    def _build_message(self) -> str:
        message = f"HTTP {self.status_code}"
        detail = self.detail
        if detail:
            message += f": {detail}"
        code = self.body.get("code") if isinstance(self.body, dict) else None
        if isinstance(code, str) and code and code != detail:
            message += f" ({code})"
        return message
