"""Role schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from rolemgmt.utils import format_timestamp


class RoleCreate(BaseModel):
    # A missing name is left for the database to reject.
    role_name: str | None = Field(default=None, max_length=50)
    description: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="ignore")


class RoleRead(BaseModel):
    role_id: int
    role_name: str
    description: str | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime | None) -> str | None:
        return format_timestamp(value)


class RoleUserRead(BaseModel):
    """User assigned to a role; the password hash is never exposed."""

    user_id: int
    username: str
    email: str
    first_name: str | None
    last_name: str | None
    active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime | None) -> str | None:
        return format_timestamp(value)
