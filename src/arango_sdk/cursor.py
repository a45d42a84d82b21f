"""Lazy cursor over a server-side query result set.

The first batch arrives with the query response. Further batches are
pulled from the server on demand, only when iteration runs past the
records already buffered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from arango_sdk.errors import ArangoError, ArangoResponseError
from arango_sdk.models.cursor import CursorBatch
from arango_sdk.models.documents import ENTRY_ID, ENTRY_REV, Document
from arango_sdk.urls import cursor_path

if TYPE_CHECKING:
    from arango_sdk.http import HTTPClient

log = logging.getLogger(__name__)


class CursorOptions(BaseModel):
    """Settings captured when the cursor is created."""

    model_config = ConfigDict(frozen=True)

    sanitize: bool = False
    """Strip ``_id`` and ``_rev`` from every record before buffering it."""


def response_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ArangoResponseError(f"cursor response is not JSON: {exc}") from exc


def decode_batch(data: Any) -> CursorBatch:
    """Validate a cursor payload, raising ArangoResponseError if it is malformed."""
    try:
        return CursorBatch.model_validate(data)
    except ValidationError as exc:
        raise ArangoResponseError(f"malformed cursor response: {exc}") from exc


class Cursor:
    """Iterates a query result set, fetching outstanding batches as needed.

    Supports both the explicit protocol::

        cursor.rewind()
        while cursor.valid():
            doc = cursor.current()
            cursor.advance()

    and plain ``for doc in cursor``. Not safe for concurrent use.
    """

    def __init__(
        self,
        http: HTTPClient,
        data: Mapping[str, Any],
        options: CursorOptions | None = None,
    ) -> None:
        self._http = http
        self._options = options or CursorOptions()
        batch = decode_batch(data)

        self._id: str | None = batch.id
        self._has_more = batch.has_more
        self._count = batch.count
        self._buffer: list[Document] = []
        self._buffer.extend(self._to_documents(batch.result))
        self._position = 0

    # --- State ---

    @property
    def id(self) -> str | None:
        """Continuation id, or None once the server holds nothing more."""
        return self._id

    @property
    def has_more(self) -> bool:
        return self._has_more

    @property
    def position(self) -> int:
        return self._position

    @property
    def options(self) -> CursorOptions:
        return self._options

    @property
    def count(self) -> int | None:
        """Full result count as reported by the server, if the query asked for it."""
        return self._count

    # --- External iteration ---

    def rewind(self) -> None:
        """Restart iteration over the buffered records. Never refetches."""
        self._position = 0

    def current(self) -> Document:
        if self._position >= len(self._buffer):
            raise IndexError(
                f"cursor position {self._position} is past the end of the result set"
            )
        return self._buffer[self._position]

    def key(self) -> int:
        return self._position

    def advance(self) -> None:
        self._position += 1

    def valid(self) -> bool:
        """Whether :meth:`current` has a record to return.

        May block on a request to the server when the buffer is used up.
        """
        if self._position < len(self._buffer):
            return True
        if not self._has_more or self._id is None:
            return False
        self._fetch_outstanding()
        return self._position < len(self._buffer)

    def at_end(self) -> bool:
        return not self.valid()

    def __iter__(self) -> Iterator[Document]:
        self.rewind()
        while self.valid():
            yield self.current()
            self.advance()

    # --- Bulk access ---

    def get_all(self) -> list[Document]:
        """Fetch every outstanding batch and return all records in arrival order."""
        self._drain()
        return list(self._buffer)

    def get_count(self) -> int:
        """Fetch every outstanding batch and return the number of records."""
        self._drain()
        return len(self._buffer)

    # --- Disposal ---

    def delete(self) -> bool:
        """Ask the server to drop the cursor.

        Best effort: returns True if the server acknowledged, False if it
        did not or if there is nothing left to delete.
        """
        if self._id is None:
            return False
        try:
            self._http.delete(cursor_path(self._id))
        except ArangoError as exc:
            log.warning("Failed to delete cursor %s: %s", self._id, exc)
            return False
        log.debug("Deleted cursor %s", self._id)
        return True

    def __enter__(self) -> Cursor:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.delete()

    def __repr__(self) -> str:
        return (
            f"<Cursor id={self._id!r} buffered={len(self._buffer)} "
            f"has_more={self._has_more}>"
        )

    # --- Internals ---

    def _drain(self) -> None:
        while self._has_more and self._id is not None:
            self._fetch_outstanding()

    def _fetch_outstanding(self) -> None:
        if self._id is None:
            return
        log.debug("Fetching next batch for cursor %s", self._id)
        r = self._http.put(cursor_path(self._id), content=b"")
        batch = decode_batch(response_json(r))
        documents = self._to_documents(batch.result)

        # Nothing above touched cursor state, so a failure leaves it as it was
        self._has_more = batch.has_more
        self._buffer.extend(documents)
        if not self._has_more:
            self._id = None
        log.debug(
            "Cursor batch of %d records, %d buffered, has_more=%s",
            len(documents), len(self._buffer), self._has_more,
        )

    def _to_documents(self, rows: list[Any]) -> list[Document]:
        try:
            return [Document.from_dict(row) for row in self._sanitize(rows)]
        except ValidationError as exc:
            raise ArangoResponseError(f"malformed cursor record: {exc}") from exc

    def _sanitize(self, rows: list[Any]) -> list[Any]:
        if not self._options.sanitize:
            return rows
        cleaned = []
        for row in rows:
            if isinstance(row, Mapping):
                row = {k: v for k, v in row.items() if k not in (ENTRY_ID, ENTRY_REV)}
            cleaned.append(row)
        return cleaned
