"""Availability model definitions."""

from sqlalchemy import Column, DateTime, Integer, String
from booking_backend.database import Base


class Availability(Base):
    """Represents the date range and daily hours a user is available."""
    __tablename__ = "availability"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)
    from_date = Column(DateTime, nullable=False)
    to_date = Column(DateTime, nullable=False)
