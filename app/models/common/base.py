"""Base classes for raw records and computed entities."""

from typing import Any

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class BaseRecord(BaseModel):
    """Read-only input record. Unknown keys are ignored, nulls fall back to defaults."""

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class BaseEntity(BaseModel):
    """Base class for all computed entities."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a dictionary with presentation (camelCase) keys."""
        return self.model_dump(by_alias=True, exclude_none=True)
