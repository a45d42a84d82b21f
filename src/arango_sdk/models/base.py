from pydantic import BaseModel, ConfigDict


class ArangoModel(BaseModel):
    """Base for all SDK models. Unknown server fields are kept, not rejected."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
