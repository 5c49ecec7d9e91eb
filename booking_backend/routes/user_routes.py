import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking_backend.database import get_db
from booking_backend.models.user import User
from booking_backend.routes.common import ApiModel, GenericErrorRoute, MessageResponse, Text, failure_message

router = APIRouter(tags=['users'], route_class=GenericErrorRoute)

logger = logging.getLogger(__name__)


class SignupRequest(ApiModel):
    name: Text = None
    email: Text = None
    password: Text = None
    confirm_password: Text = None
    role: Text = None


class LoginRequest(ApiModel):
    username: Text = None
    password: Text = None


class UserResponse(ApiModel):
    id: int
    name: str
    email: str
    role: str


@router.get('/users', response_model=list[UserResponse])
@failure_message('Failed to fetch users')
def list_users(db: Session = Depends(get_db)):
    try:
        users = db.query(User).order_by(User.id.asc()).all()
    except SQLAlchemyError as exc:
        logger.exception('Error fetching users')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch users',
        ) from exc

    return [UserResponse.model_validate(user) for user in users]


@router.post('/signup', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@failure_message('Failed to save user')
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    if data.password != data.confirm_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Passwords do not match',
        )

    user = User(name=data.name, email=data.email, password=data.password, role=data.role)

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Error saving user')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to save user',
        ) from exc

    return UserResponse.model_validate(user)


@router.post('/login', response_model=MessageResponse)
@failure_message('Login failed')
def login(data: LoginRequest, db: Session = Depends(get_db)):
    # Plaintext equality against the stored password.
    try:
        user = db.query(User).filter(
            User.name == data.username,
            User.password == data.password,
        ).first()
    except SQLAlchemyError as exc:
        logger.exception('Error looking up user for login')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Login failed',
        ) from exc

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail='Invalid username or password',
        )

    return MessageResponse(message='Login successful')
