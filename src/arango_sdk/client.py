"""High-level client composing the HTTP transport and API groups."""

from __future__ import annotations

from typing import Any

from arango_sdk.cursor import Cursor
from arango_sdk.http import HTTPClient


class Client:
    """Top-level SDK client.

    Usage::

        with Client("http://localhost:8529", token, database="shop") as client:
            for doc in client.query("FOR p IN products RETURN p", batch_size=100):
                print(doc["name"])
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        database: str | None = None,
    ) -> None:
        self.http = HTTPClient(base_url, token, timeout=timeout, database=database)
        self._cursors: Any = None

    @property
    def cursors(self) -> Any:
        if self._cursors is None:
            from arango_sdk.api.cursor import CursorAPI
            self._cursors = CursorAPI(self.http)
        return self._cursors

    def query(self, query: str, **kwargs: Any) -> Cursor:
        """Shortcut for ``client.cursors.create(...)``."""
        return self.cursors.create(query, **kwargs)

    # --- Context manager ---

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
