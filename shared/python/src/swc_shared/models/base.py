"""
models/base.py — base classes for the create / update / read record models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

R = TypeVar("R", bound="RecordModel")


class InsertModel(BaseModel):
    """Payload for creating a row; every declared field is written."""

    model_config = ConfigDict(extra="forbid")

    def to_insert_dict(self) -> dict[str, Any]:
        return self.model_dump()


class UpdateModel(BaseModel):
    """
    Partial payload; only fields the caller actually sent are written.

    Fields named in `not_null` map to NOT NULL columns: leaving them out is
    fine, sending an explicit null is a validation error.
    """

    model_config = ConfigDict(extra="forbid")

    not_null: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulled = sorted(
            name for name in self.not_null
            if name in self.model_fields_set and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def to_update_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class RecordModel(BaseModel):
    """A persisted row as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_db_row(cls: type[R], row: Any) -> R:
        """Build from an ORM instance or a plain dict."""
        return cls.model_validate(row)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
