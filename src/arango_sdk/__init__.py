"""Python client SDK for paginated ArangoDB query results."""

from arango_sdk.client import Client
from arango_sdk.cursor import Cursor, CursorOptions
from arango_sdk.errors import ArangoError, ArangoHTTPError, ArangoNetworkError, ArangoResponseError
from arango_sdk.models.documents import Document

__all__ = [
    "ArangoError",
    "ArangoHTTPError",
    "ArangoNetworkError",
    "ArangoResponseError",
    "Client",
    "Cursor",
    "CursorOptions",
    "Document",
]
