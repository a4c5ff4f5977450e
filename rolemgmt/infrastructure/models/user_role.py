"""Association table linking users and roles."""

from sqlalchemy import Column, ForeignKey, Integer, Table

from rolemgmt.infrastructure.database import Base

# No ON DELETE CASCADE: RoleRepository.delete removes the assignments itself.
user_roles_table = Table(
    "user_roles",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.user_id"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.role_id"),
        primary_key=True,
        index=True,
    ),
)


__all__ = ["user_roles_table"]
