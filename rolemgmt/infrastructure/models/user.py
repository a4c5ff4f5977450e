"""SQLAlchemy model for the users table."""

from sqlalchemy import CHAR, Column, DateTime, Integer, String, func

from rolemgmt.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a user.

    The table is owned by the user management subsystem; this service only
    reads it. ``active`` keeps the legacy ``'Y'``/``'N'`` encoding.
    """

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(120), nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    active = Column(CHAR(1), nullable=False, default="Y", server_default="Y")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["UserModel"]
