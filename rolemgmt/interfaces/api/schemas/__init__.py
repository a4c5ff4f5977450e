from .role import RoleCreate, RoleRead, RoleUserRead

__all__ = [
    "RoleCreate",
    "RoleRead",
    "RoleUserRead",
]
