"""Use case for retrieving a single role."""

from sqlalchemy.orm import Session

from rolemgmt.domain.entities import Role
from rolemgmt.infrastructure.repositories import RoleRepository


def get_role(session: Session, role_id: int) -> Role:
    """Return the requested role or raise an error if it does not exist."""

    role = RoleRepository(session).get(role_id)
    if role is None:
        raise ValueError("Rol no encontrado")
    return role
