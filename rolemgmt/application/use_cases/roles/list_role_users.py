"""Use case for listing the users assigned to a role."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from rolemgmt.domain.entities import User
from rolemgmt.infrastructure.repositories import RoleRepository


def list_role_users(session: Session, role_id: int) -> Sequence[User]:
    return RoleRepository(session).list_users(role_id)
