"""ORM model for application users (auth, RBAC and login audit)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from sensorhub.models.base import Base


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: one of sensorhub.core.roles.Role. last_login / last_ip stay NULL until
    the first successful login.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False)
    last_login = Column(DateTime(timezone=True), nullable=True)
    last_ip = Column(String(64), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
