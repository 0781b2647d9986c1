"""SDK exception hierarchy."""

from __future__ import annotations

import httpx


class GuggyError(Exception):
    """Base class for every error raised by the SDK."""


class GuggyConfigurationError(GuggyError):
    """Raised when the client is built without a usable API key."""


class GuggyValidationError(GuggyError):
    """Raised when a search request is missing or has a blank query."""


class GuggyTransportError(GuggyError):
    """Raised when the request could not be completed successfully."""


class GuggyNetworkError(GuggyTransportError):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GuggyHTTPError(GuggyTransportError):
    """Raised when the Guggy API returns a non-2xx response.

    The body of the response is never parsed; ``str(err)`` is the status
    line, e.g. ``401 Unauthorized``.
    """

    def __init__(
        self,
        status: int,
        reason: str = "",
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.reason = reason
        self.response = response
        super().__init__(f"{status} {reason}".strip())

    @classmethod
    def from_response(cls, response: httpx.Response) -> GuggyHTTPError:
        return cls(status=response.status_code, reason=response.reason_phrase, response=response)

    @property
    def status_line(self) -> str:
        return str(self)


class GuggyCancelledError(GuggyError):
    """Raised when the caller cancelled the search or its deadline passed."""


class GuggyDecodeError(GuggyError):
    """Raised when a 2xx body is not valid JSON for a search response."""


class GuggyEmptyResponseError(GuggyError):
    """Raised when the server answers with a well-formed but empty response."""

    def __init__(self, message: str = "server sent back a blank response") -> None:
        super().__init__(message)
