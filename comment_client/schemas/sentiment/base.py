from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator


class ServiceAnswer(BaseModel):
    """Decodes whatever the service answered; unusable values read as missing"""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _object_body(cls, data: Any) -> Any:
        # Error pages and lists carry no fields
        if not isinstance(data, dict):
            return {}
        return data

    @field_validator("*", mode="wrap")
    @classmethod
    def _missing_when_invalid(cls, value: Any, handler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None
