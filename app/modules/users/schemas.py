import uuid

from pydantic import EmailStr, Field

from app.schemas.base import BaseSchema, TimestampedSchema, UpdateSchema

class UserCreate(BaseSchema):
    name: str = Field(..., min_length=3)
    email: EmailStr
    password: str = Field(..., min_length=6)

class UserUpdate(UpdateSchema):
    name: str | None = Field(None, min_length=3)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=6)

# no password field: credentials never leave the service
class UserRead(TimestampedSchema):
    id: uuid.UUID
    name: str
    email: str
