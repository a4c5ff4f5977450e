"""Repository implementations for infrastructure layer."""

from .errors import DataAccessError
from .role_repository import RoleRepository

__all__ = [
    "DataAccessError",
    "RoleRepository",
]
