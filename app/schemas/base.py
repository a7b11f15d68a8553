from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class TimestampedSchema(BaseSchema):
    created_at: datetime | None = None
    updated_at: datetime | None = None

class ErrorResponse(BaseModel):
    detail: str

class DeleteResponse(BaseSchema):
    deleted: bool = True
    id: str

class UpdateSchema(BaseSchema):
    """Partial update payload: every field optional, nothing undeclared."""

    # fields that may be explicitly cleared with null
    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    class Config:
        extra = "forbid"


def apply_update(entity: Any, payload: UpdateSchema) -> Any:
    """
    Copy the fields the client actually sent onto the ORM entity.

    Only fields declared on the payload schema can appear here. An explicit
    null is skipped unless the field is listed in ``nullable_fields``.
    """
    changes = payload.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if value is None and field not in payload.nullable_fields:
            continue
        setattr(entity, field, value)
    return entity
