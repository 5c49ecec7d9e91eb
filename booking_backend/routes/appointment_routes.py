import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking_backend.database import get_db
from booking_backend.models.appointment import Appointment
from booking_backend.routes.common import ApiModel, GenericErrorRoute, UtcDateTime, failure_message

router = APIRouter(tags=['appointments'], route_class=GenericErrorRoute)

logger = logging.getLogger(__name__)


class AppointmentUser(ApiModel):
    name: str
    email: str
    gender: str
    photo: str


class AppointmentResponse(ApiModel):
    id: int
    user: AppointmentUser
    is_paid: bool
    ticket_price: float
    created_at: UtcDateTime | None = None


def to_appointment_response(appointment: Appointment) -> AppointmentResponse:
    return AppointmentResponse(
        id=appointment.id,
        user=AppointmentUser(
            name=appointment.user_name,
            email=appointment.user_email,
            gender=appointment.user_gender,
            photo=appointment.user_photo,
        ),
        is_paid=bool(appointment.is_paid),
        ticket_price=appointment.ticket_price,
        created_at=appointment.created_at,
    )


@router.get('/appointments', response_model=list[AppointmentResponse])
@failure_message('Failed to fetch appointments')
def list_appointments(db: Session = Depends(get_db)):
    try:
        appointments = db.query(Appointment).order_by(Appointment.id.asc()).all()
    except SQLAlchemyError as exc:
        logger.exception('Error fetching appointments')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch appointments',
        ) from exc

    return [to_appointment_response(appointment) for appointment in appointments]
