"""Appointment model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from booking_backend.database import Base


class Appointment(Base):
    """Represents a paid or pending appointment ticket.

    The booking user's details are stored inline with the appointment
    rather than referenced.
    """
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True)
    user_name = Column(String, nullable=False)
    user_email = Column(String, nullable=False)
    user_gender = Column(String, nullable=False)
    user_photo = Column(String, nullable=False)
    is_paid = Column(Boolean, nullable=False, default=False)
    ticket_price = Column(Float, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc).replace(tzinfo=None))
