"""Use case for creating roles."""

from sqlalchemy.orm import Session

from rolemgmt.domain.entities import Role
from rolemgmt.infrastructure.repositories import RoleRepository


def create_role(
    session: Session,
    *,
    role_name: str | None,
    description: str | None = None,
) -> Role:
    """Persist a new role and return it with its generated identifier.

    ``role_name`` is not validated here; the database rejects missing names.
    """

    repository = RoleRepository(session)
    return repository.create(Role(role_name=role_name, description=description))
