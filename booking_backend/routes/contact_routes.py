import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking_backend.database import get_db
from booking_backend.models.contact import Contact
from booking_backend.routes.common import ApiModel, GenericErrorRoute, Text, failure_message

router = APIRouter(tags=['contact'], route_class=GenericErrorRoute)

logger = logging.getLogger(__name__)


class ContactRequest(ApiModel):
    email: Text = None
    subject: Text = None
    message: Text = None


class ContactResponse(ApiModel):
    id: int
    email: str
    subject: str
    message: str


class StoreContactResponse(ApiModel):
    message: str
    contact: ContactResponse


@router.post('/contact', response_model=StoreContactResponse, status_code=status.HTTP_201_CREATED)
@failure_message('Failed to store contact form submission')
def store_contact(data: ContactRequest, db: Session = Depends(get_db)):
    contact = Contact(email=data.email, subject=data.subject, message=data.message)

    try:
        db.add(contact)
        db.commit()
        db.refresh(contact)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Error storing contact form submission')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to store contact form submission',
        ) from exc

    return StoreContactResponse(
        message='Contact form submission stored successfully',
        contact=ContactResponse.model_validate(contact),
    )


@router.get('/contacts', response_model=list[ContactResponse])
@failure_message('Failed to fetch contact submissions')
def list_contacts(db: Session = Depends(get_db)):
    try:
        contacts = db.query(Contact).order_by(Contact.id.asc()).all()
    except SQLAlchemyError as exc:
        logger.exception('Error fetching contact form submissions')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch contact submissions',
        ) from exc

    return [ContactResponse.model_validate(contact) for contact in contacts]
