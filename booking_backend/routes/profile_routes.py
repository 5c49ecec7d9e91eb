import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking_backend.database import get_db
from booking_backend.models.availability import Availability
from booking_backend.models.pricing import Pricing
from booking_backend.models.profile import Profile
from booking_backend.models.user import User
from booking_backend.models.user_profile import UserProfile
from booking_backend.routes.common import (
    ApiModel,
    GenericErrorRoute,
    Text,
    UtcDateTime,
    failure_message,
    parse_datetime,
    price_as_number,
)
from booking_backend.routes.user_routes import UserResponse

router = APIRouter(tags=['profiles'], route_class=GenericErrorRoute)

logger = logging.getLogger(__name__)


class UpdateProfileRequest(ApiModel):
    email: Text = None
    name: Text = None
    password: Text = None
    bio: Text = None
    phone: Text = None
    start_time: Text = None
    end_time: Text = None
    price: int | float | str | None = None
    blood_type: Text = None
    gender: Text = None
    from_date: Text = None
    to_date: Text = None


class UserProfileResponse(ApiModel):
    id: int
    user_id: int
    bio: str | None = None
    phone: str | None = None
    availability_id: int | None = None
    pricing_id: int | None = None
    blood_type: str | None = None
    gender: str | None = None
    created_at: UtcDateTime | None = None


class AvailabilityResponse(ApiModel):
    id: int
    user_id: int
    start_time: str
    end_time: str
    from_date: UtcDateTime
    to_date: UtcDateTime


class PricingResponse(ApiModel):
    id: int
    user_id: int
    price: float


class UpdateProfileResponse(ApiModel):
    message: str
    user: UserResponse
    user_profile: UserProfileResponse
    availability: AvailabilityResponse
    pricing: PricingResponse


class ProfileRequest(ApiModel):
    email: Text = None
    phone: Text = None
    start_time: Text = None
    end_time: Text = None
    start_date: Text = None
    end_date: Text = None


class ProfileResponse(ApiModel):
    id: int
    email: str
    phone: str
    start_time: str
    end_time: str
    start_date: str
    end_date: str


class SaveProfileResponse(ApiModel):
    message: str
    profile: ProfileResponse


@router.post('/updateProfile', response_model=UpdateProfileResponse)
@failure_message('Failed to update profile')
def update_profile(data: UpdateProfileRequest, db: Session = Depends(get_db)):
    """Update a user and upsert their profile, availability and pricing.

    Each record is committed on its own, in order. A failure part way
    through leaves the earlier writes in place.
    """
    try:
        user = db.query(User).filter(User.email == data.email).first()
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail='User not found',
            )

        user.name = data.name
        if data.password:
            user.password = data.password
        db.commit()

        user_profile = db.query(UserProfile).filter(UserProfile.user_id == user.id).first()
        if user_profile is None:
            user_profile = UserProfile(user_id=user.id)

        from_date = parse_datetime(data.from_date, 'fromDate')
        to_date = parse_datetime(data.to_date, 'toDate')
        availability = db.query(Availability).filter(Availability.user_id == user.id).first()
        if availability is None:
            availability = Availability(user_id=user.id)
            db.add(availability)
        availability.start_time = data.start_time
        availability.end_time = data.end_time
        availability.from_date = from_date
        availability.to_date = to_date
        db.commit()

        pricing = db.query(Pricing).filter(Pricing.user_id == user.id).first()
        if pricing is None:
            pricing = Pricing(user_id=user.id)
            db.add(pricing)
        pricing.price = price_as_number(data.price)
        db.commit()

        user_profile.bio = data.bio
        user_profile.phone = data.phone
        user_profile.blood_type = data.blood_type
        user_profile.gender = data.gender
        user_profile.availability_id = availability.id
        user_profile.pricing_id = pricing.id
        db.add(user_profile)
        db.commit()

        return UpdateProfileResponse(
            message='Profile updated successfully',
            user=UserResponse.model_validate(user),
            user_profile=UserProfileResponse.model_validate(user_profile),
            availability=AvailabilityResponse.model_validate(availability),
            pricing=PricingResponse.model_validate(pricing),
        )
    except (SQLAlchemyError, ValueError) as exc:
        db.rollback()
        logger.exception('Error updating profile')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to update profile',
        ) from exc


@router.post('/Profile', response_model=SaveProfileResponse)
@failure_message('Failed to update profile')
def save_profile(data: ProfileRequest, db: Session = Depends(get_db)):
    try:
        profile = db.query(Profile).filter(Profile.email == data.email).first()
        if profile is None:
            profile = Profile(email=data.email)
            db.add(profile)

        profile.phone = data.phone
        profile.start_time = data.start_time
        profile.end_time = data.end_time
        profile.start_date = data.start_date
        profile.end_date = data.end_date
        db.commit()
        db.refresh(profile)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Error updating profile')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to update profile',
        ) from exc

    return SaveProfileResponse(
        message='Profile updated successfully',
        profile=ProfileResponse.model_validate(profile),
    )
