"""Contact form model definitions."""

from sqlalchemy import Column, Integer, String
from booking_backend.database import Base


class Contact(Base):
    """Represents a contact form submission."""
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True)
    email = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    message = Column(String, nullable=False)
