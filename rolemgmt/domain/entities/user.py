"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a user assigned to roles."""

    user_id: int
    username: str
    email: str
    password_hash: str
    first_name: str | None
    last_name: str | None
    active: bool
    created_at: datetime | None
    updated_at: datetime | None


__all__ = ["User"]
