"""ORM models used by the application infrastructure."""

from .role import RoleModel
from .user import UserModel
from .user_role import user_roles_table

__all__ = [
    "RoleModel",
    "UserModel",
    "user_roles_table",
]
