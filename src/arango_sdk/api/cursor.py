"""Cursor API methods."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from arango_sdk.cursor import Cursor, CursorOptions, decode_batch, response_json
from arango_sdk.models.cursor import CursorBatch, QueryRequest
from arango_sdk.urls import URL_CURSOR, cursor_path

if TYPE_CHECKING:
    from arango_sdk.http import HTTPClient

log = logging.getLogger(__name__)


class CursorAPI:
    """Methods for /_api/cursor endpoints."""

    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    def create(
        self,
        query: str,
        *,
        bind_vars: dict[str, Any] | None = None,
        batch_size: int | None = None,
        count: bool = False,
        sanitize: bool = False,
    ) -> Cursor:
        """Run an AQL query and return a cursor over its results."""
        payload = QueryRequest(
            query=query, bind_vars=bind_vars, batch_size=batch_size, count=count
        )
        r = self._http.post(
            URL_CURSOR, json=payload.model_dump(by_alias=True, exclude_none=True)
        )
        cursor = Cursor(self._http, response_json(r), CursorOptions(sanitize=sanitize))
        log.info("Created cursor %s (has_more=%s)", cursor.id, cursor.has_more)
        return cursor

    def read_next(self, cursor_id: str) -> CursorBatch:
        r = self._http.put(cursor_path(cursor_id), content=b"")
        return decode_batch(response_json(r))

    def delete(self, cursor_id: str) -> None:
        self._http.delete(cursor_path(cursor_id))
