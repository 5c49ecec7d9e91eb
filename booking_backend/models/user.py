"""User model definitions."""

from sqlalchemy import Column, Enum, Integer, String
from booking_backend.database import Base


USER_ROLES = ('patient', 'doctor')


class User(Base):
    """Represents a registered patient or doctor account."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)  # stored as submitted
    role = Column(Enum(*USER_ROLES, name="user_role", create_constraint=True), nullable=False)
