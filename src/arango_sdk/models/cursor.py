from typing import Any

from pydantic import Field, field_validator

from arango_sdk.models.base import ArangoModel


class CursorBatch(ArangoModel):
    """One page of results, from the initial query or a continuation."""

    id: str | None = None
    has_more: bool = Field(alias="hasMore")
    result: list[Any]
    count: int | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Some server versions send the cursor id as a number
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class QueryRequest(ArangoModel):
    query: str
    bind_vars: dict[str, Any] | None = Field(None, alias="bindVars")
    batch_size: int | None = Field(None, alias="batchSize")
    count: bool = False
