from typing import Any, Self

from pydantic import BaseModel, ConfigDict, model_validator


class OkxModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, coerce_numbers_to_str=True, extra="ignore"
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Self:
        """Map a decoded JSON object to the model."""
        return cls.model_validate(data)

    def to_json(self) -> dict[str, Any]:
        """Serialize back to the wire field names."""
        return self.model_dump(by_alias=True)
