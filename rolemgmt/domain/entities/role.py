"""Domain entity representing a role."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Role:
    """A named permission grouping that can be assigned to users.

    ``role_id`` and both timestamps are assigned by the database when the
    role is created.
    """

    role_name: str | None
    description: str | None = None
    role_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Role"]
