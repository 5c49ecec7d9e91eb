"""Patient model definitions."""

from sqlalchemy import Column, DateTime, Integer, String
from booking_backend.database import Base


class Patient(Base):
    """Represents a patient's booking request for a doctor and time slot."""
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    gender = Column(String, nullable=False)
    selected_doctor = Column(String, nullable=False)  # free text, not a users.id reference
    selected_date = Column(DateTime, nullable=False)
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)
    price = Column(String, nullable=False)
