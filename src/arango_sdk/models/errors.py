from enum import IntEnum

from pydantic import Field

from arango_sdk.models.base import ArangoModel


class ErrorCode(IntEnum):
    """Server ``errorNum`` values the SDK knows by name."""

    INTERNAL = 4
    HTTP_BAD_PARAMETER = 400
    HTTP_UNAUTHORIZED = 401
    HTTP_FORBIDDEN = 403
    HTTP_NOT_FOUND = 404
    HTTP_SERVICE_UNAVAILABLE = 503
    DATABASE_NOT_FOUND = 1228
    QUERY_KILLED = 1500
    QUERY_PARSE = 1501
    QUERY_BIND_PARAMETER_MISSING = 1551
    CURSOR_NOT_FOUND = 1600
    CURSOR_BUSY = 1601


class ErrorResponse(ArangoModel):
    error: bool = True
    code: int | None = None
    error_num: int = Field(alias="errorNum")
    error_message: str = Field("", alias="errorMessage")
