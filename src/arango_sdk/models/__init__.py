"""SDK response models."""

from arango_sdk.models.base import ArangoModel
from arango_sdk.models.cursor import CursorBatch, QueryRequest
from arango_sdk.models.documents import Document
from arango_sdk.models.errors import ErrorCode, ErrorResponse

__all__ = [
    "ArangoModel",
    "CursorBatch",
    "Document",
    "ErrorCode",
    "ErrorResponse",
    "QueryRequest",
]
