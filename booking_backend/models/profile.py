"""Profile model definitions."""

from sqlalchemy import Column, Integer, String
from booking_backend.database import Base


class Profile(Base):
    """Represents contact details and availability keyed by email."""
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)
    start_date = Column(String, nullable=False)
    end_date = Column(String, nullable=False)
