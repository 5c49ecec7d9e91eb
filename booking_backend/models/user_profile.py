"""User profile model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from booking_backend.database import Base


class UserProfile(Base):
    """Extra profile details for a user, linked to their availability and pricing."""
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    bio = Column(String)
    phone = Column(String)
    availability_id = Column(Integer)
    pricing_id = Column(Integer)
    blood_type = Column(String)
    gender = Column(String)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc).replace(tzinfo=None))
