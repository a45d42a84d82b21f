"""SDK exception hierarchy."""

from __future__ import annotations

import httpx

from arango_sdk.models.errors import ErrorCode, ErrorResponse


class ArangoError(Exception):
    """Base class for every error raised by the SDK."""


class ArangoHTTPError(ArangoError):
    """Raised when the server returns a non-2xx response."""

    def __init__(
        self,
        status: int,
        error: ErrorResponse | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.error = error
        self.response = response
        num = error.error_num if error else "UNKNOWN"
        msg = error.error_message if error and error.error_message else f"HTTP {status}"
        super().__init__(f"[{status}] {num}: {msg}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> ArangoHTTPError:
        """Build from an httpx response, attempting to parse the error body."""
        error: ErrorResponse | None = None
        try:
            body = response.json()
            if isinstance(body, dict) and "errorNum" in body:
                error = ErrorResponse.model_validate(body)
        except ValueError:
            # Non-JSON body, or a JSON body that is not an error document
            pass
        return cls(status=response.status_code, error=error, response=response)

    @property
    def error_num(self) -> int | None:
        return self.error.error_num if self.error else None

    @property
    def code(self) -> ErrorCode | None:
        num = self.error_num
        if num is None:
            return None
        try:
            return ErrorCode(num)
        except ValueError:
            return None


class ArangoNetworkError(ArangoError):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ArangoResponseError(ArangoError, ValueError):
    """Raised when a server payload is missing attributes the SDK relies on."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
