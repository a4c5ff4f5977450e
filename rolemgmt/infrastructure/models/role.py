"""SQLAlchemy model for roles."""

from sqlalchemy import Column, DateTime, Integer, String, func

from rolemgmt.infrastructure.database import Base


class RoleModel(Base):
    """Database representation of the roles that can be assigned to users."""

    __tablename__ = "roles"

    role_id = Column(Integer, primary_key=True, index=True)
    role_name = Column(String(50), nullable=False, unique=True)
    description = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["RoleModel"]
