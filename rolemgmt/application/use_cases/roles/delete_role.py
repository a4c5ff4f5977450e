"""Use case for deleting a role."""

from sqlalchemy.orm import Session

from rolemgmt.infrastructure.repositories import RoleRepository


def delete_role(session: Session, role_id: int) -> bool:
    """Delete the role and its user assignments.

    Returns ``False`` when there was no role to delete.
    """

    return RoleRepository(session).delete(role_id)
