"""HTTP client wrapping httpx with auth headers and retry of unprocessed requests."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from arango_sdk.errors import ArangoHTTPError, ArangoNetworkError
from arango_sdk.urls import database_prefix

log = logging.getLogger(__name__)

_MAX_RETRIES = 3
_BASE_RETRY_DELAY = 1.0
# Only statuses where the server did not act on the request. Cursor
# continuations are not idempotent, so a 500 must never be replayed.
_RETRYABLE_STATUSES = {429, 503}


class HTTPClient:
    """Blocking HTTP client for the server's REST API."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        database: str | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.database = database
        self._token = token
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
        )

    @property
    def token(self) -> str | None:
        return self._token

    @token.setter
    def token(self, value: str | None) -> None:
        self._token = value

    def _headers(self) -> dict[str, str]:
        h: dict[str, str] = {}
        if self._token:
            h["Authorization"] = f"Bearer {self._token}"
        return h

    def _url(self, path: str) -> str:
        return database_prefix(self.database) + path

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        content: str | bytes | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make an API request, retrying responses the server did not process."""
        merged_headers = self._headers()
        if headers:
            merged_headers.update(headers)
        url = self._url(path)

        for attempt in range(_MAX_RETRIES):
            try:
                response = self._client.request(
                    method,
                    url,
                    json=json,
                    content=content,
                    params=params,
                    headers=merged_headers,
                )
            except httpx.TransportError as exc:
                raise ArangoNetworkError(str(exc)) from exc

            if response.status_code in _RETRYABLE_STATUSES:
                if attempt < _MAX_RETRIES - 1:
                    delay = _BASE_RETRY_DELAY * (2 ** attempt)
                    ra_header = response.headers.get("retry-after")
                    if ra_header:
                        try:
                            delay = float(ra_header)
                        except ValueError:
                            pass
                    log.warning(
                        "%s %s returned %d, retrying in %.1fs",
                        method, url, response.status_code, delay,
                    )
                    time.sleep(delay)
                    continue
                raise ArangoHTTPError.from_response(response)

            if response.status_code >= 400:
                raise ArangoHTTPError.from_response(response)

            return response

        # Should not reach here, but just in case
        raise ArangoHTTPError.from_response(response)  # type: ignore[possibly-undefined]

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
