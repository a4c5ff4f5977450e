"""Aggregate application use cases."""

from .roles import create_role, delete_role, get_role, list_role_users

__all__ = [
    "create_role",
    "delete_role",
    "get_role",
    "list_role_users",
]
