"""Pricing model definitions."""

from sqlalchemy import Column, Float, Integer
from booking_backend.database import Base


class Pricing(Base):
    """Represents the consultation price a user charges."""
    __tablename__ = "pricing"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    price = Column(Float, nullable=False)
