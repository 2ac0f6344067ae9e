# typed_digest/schemas.py
import json
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import MalformedValue


class FieldDefinition(BaseModel):
    """One member of a struct type: {"name": ..., "type": ...}."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: str = Field(min_length=1)


class TypedMessage(BaseModel):
    """Full signing request: primaryType, types, domain and message."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    primary_type: str = Field(alias="primaryType", min_length=1)
    types: Dict[str, List[FieldDefinition]]
    domain: Dict[str, Any]
    message: Dict[str, Any]

    @field_validator("types")
    @classmethod
    def unique_field_names(cls, v):
        for type_name, fields in v.items():
            names = [f.name for f in fields]
            if len(names) != len(set(names)):
                raise ValueError(f"duplicate field name in type {type_name}")
        return v

    @classmethod
    def parse(cls, obj: Any) -> "TypedMessage":
        """Validate a decoded typed-data document, raising MalformedValue on bad shape."""
        try:
            return cls.model_validate(obj)
        except ValidationError as e:
            first = e.errors()[0]
            where = ".".join(str(p) for p in first["loc"]) or "<document>"
            raise MalformedValue("TypedMessage", where, first["msg"]) from e

    @classmethod
    def from_json(cls, text: str) -> "TypedMessage":
        """Parse a typed-data JSON document."""
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedValue("TypedMessage", "<document>", f"invalid JSON ({e.msg})") from e
        return cls.parse(obj)
