"""Persistence layer for roles and their user assignments."""

from __future__ import annotations

import logging
from typing import NoReturn

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rolemgmt.domain.entities import Role, User
from rolemgmt.infrastructure.models import RoleModel, UserModel, user_roles_table

from .errors import DataAccessError

logger = logging.getLogger(__name__)

ACTIVE_FLAG = "Y"


class RoleRepository:
    """Provide create, read and cascading delete operations for roles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, role: Role) -> Role:
        """Insert ``role`` and populate it with the generated key and timestamps."""

        model = RoleModel(role_name=role.role_name, description=role.description)
        try:
            self.session.add(model)
            self.session.flush()
            self.session.refresh(model)
            generated = (model.role_id, model.created_at, model.updated_at)
            self.session.commit()
        except SQLAlchemyError as exc:
            self._fail("create_role", f"Error creating role {role.role_name!r}", exc)
        # Only a committed row hands its key back to the caller.
        role.role_id, role.created_at, role.updated_at = generated
        return role

    def get(self, role_id: int) -> Role | None:
        try:
            model = self.session.get(RoleModel, role_id)
        except SQLAlchemyError as exc:
            self._fail("get_role", f"Error fetching role ID: {role_id}", exc)
        return self._to_entity(model) if model else None

    def list_users(self, role_id: int) -> list[User]:
        """Return the users assigned to ``role_id``, in database order."""

        try:
            models = self.session.scalars(self._users_statement(role_id)).all()
        except SQLAlchemyError as exc:
            self._fail("list_role_users", f"Error fetching users for role ID: {role_id}", exc)
        return [self._user_to_entity(model) for model in models]

    def delete(self, role_id: int) -> bool:
        """Remove the role and its user assignments in a single transaction.

        Returns ``False`` when the role does not exist.
        """

        try:
            model = self.session.get(RoleModel, role_id)
            if model is None:
                logger.warning("Attempt to delete nonexistent role ID: %s", role_id)
                return False

            role_name = model.role_name
            logger.info("Deleting role: %s (ID: %s)", role_name, role_id)

            affected_users = [
                self._user_to_entity(user)
                for user in self.session.scalars(self._users_statement(role_id))
            ]
            logger.info(
                "%d users will be affected by the deletion of role ID: %s",
                len(affected_users),
                role_id,
            )

            assignments = self.session.execute(
                delete(user_roles_table).where(user_roles_table.c.role_id == role_id)
            )
            logger.info("Removed %d user assignments for role ID: %s", assignments.rowcount, role_id)

            result = self.session.execute(
                delete(RoleModel).where(RoleModel.role_id == role_id)
            )
            deleted = result.rowcount > 0
            self.session.commit()
        except SQLAlchemyError as exc:
            self._fail("delete_role", f"Error deleting role ID: {role_id}", exc)

        if deleted:
            logger.info("Role deleted: %s (ID: %s)", role_name, role_id)
            if affected_users:
                logger.info(
                    "Users affected by the deletion of role ID %s: %s",
                    role_id,
                    ", ".join(f"{user.username} (ID: {user.user_id})" for user in affected_users),
                )
        return deleted

    def _fail(self, operation: str, message: str, exc: SQLAlchemyError) -> NoReturn:
        try:
            self.session.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed after %s", operation)
        logger.error(message, exc_info=exc)
        detail = getattr(exc, "orig", None) or exc
        raise DataAccessError(operation, f"{message}: {detail}") from exc

    @staticmethod
    def _users_statement(role_id: int):
        return (
            select(UserModel)
            .join(user_roles_table, UserModel.user_id == user_roles_table.c.user_id)
            .where(user_roles_table.c.role_id == role_id)
        )

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(
            role_id=model.role_id,
            role_name=model.role_name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _user_to_entity(model: UserModel) -> User:
        return User(
            user_id=model.user_id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            active=(model.active or "").upper() == ACTIVE_FLAG,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["RoleRepository"]
