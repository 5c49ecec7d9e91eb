import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking_backend.database import get_db
from booking_backend.models.patient import Patient
from booking_backend.routes.common import (
    ApiModel,
    GenericErrorRoute,
    Text,
    UtcDateTime,
    failure_message,
    parse_datetime,
    price_as_text,
)

router = APIRouter(tags=['patients'], route_class=GenericErrorRoute)

logger = logging.getLogger(__name__)


class StorePatientInfoRequest(ApiModel):
    name: Text = None
    email: Text = None
    phone: Text = None
    gender: Text = None
    selected_doctor: Text = None
    selected_date: Text = None
    start_time: Text = None
    end_time: Text = None
    price: int | float | str | None = None


class PatientResponse(ApiModel):
    id: int
    name: str
    email: str
    phone: str
    gender: str
    selected_doctor: str
    selected_date: UtcDateTime
    start_time: str
    end_time: str
    price: str


class StorePatientInfoResponse(ApiModel):
    message: str
    patient: PatientResponse


@router.post('/storePatientInfo', response_model=StorePatientInfoResponse, status_code=status.HTTP_201_CREATED)
@failure_message('Failed to store patient information')
def store_patient_info(data: StorePatientInfoRequest, db: Session = Depends(get_db)):
    try:
        patient = Patient(
            name=data.name,
            email=data.email,
            phone=data.phone,
            gender=data.gender,
            selected_doctor=data.selected_doctor,
            selected_date=parse_datetime(data.selected_date, 'selectedDate'),
            start_time=data.start_time,
            end_time=data.end_time,
            price=price_as_text(data.price),
        )
        db.add(patient)
        db.commit()
        db.refresh(patient)
    except (SQLAlchemyError, ValueError) as exc:
        db.rollback()
        logger.exception('Error storing patient information')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to store patient information',
        ) from exc

    return StorePatientInfoResponse(
        message='Patient information stored successfully',
        patient=PatientResponse.model_validate(patient),
    )


@router.get('/patients', response_model=list[PatientResponse])
@failure_message('Failed to fetch patients')
def list_patients(db: Session = Depends(get_db)):
    try:
        patients = db.query(Patient).order_by(Patient.id.asc()).all()
    except SQLAlchemyError as exc:
        logger.exception('Error fetching patients')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch patients',
        ) from exc

    return [PatientResponse.model_validate(patient) for patient in patients]
