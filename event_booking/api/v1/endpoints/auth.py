"""
Authentication endpoints.

Handles user registration and login.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from event_booking.api.dependencies import get_current_user
from event_booking.db.session import get_db
from event_booking.models.user import User
from event_booking.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from event_booking.schemas.common import ApiResponse
from event_booking.schemas.user import UserResponse
from event_booking.services.auth_service import AuthService
from event_booking.services.user_service import UserService

router = APIRouter()


@router.post("/register",
             summary="User registration endpoint.",
             response_model=ApiResponse[AuthResponse],
             status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new user.

    Args:
        request: Registration data (email, password, firstName, lastName, phone)
        db: Database session

    Returns:
        Envelope with the access token, email and userId

    Raises:
        ValidationException 400: If email already registered
    """
    response = AuthService(db).register(request)
    return ApiResponse[AuthResponse](data=response, message="User registered successfully")


@router.post("/login",
             summary="User login endpoint.",
             response_model=ApiResponse[AuthResponse])
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Authenticate user via JSON body.

    Args:
        request: User login credentials (email, password)
        db: Database session

    Returns:
        Envelope with the access token
    """
    response = AuthService(db).login(request)
    return ApiResponse[AuthResponse](data=response, message="Login successful")


@router.get("/me",
            summary="User info endpoint.",
            response_model=ApiResponse[UserResponse])
def me(user: User = Depends(get_current_user)):
    return ApiResponse[UserResponse](data=UserService.to_response(user), message="Current user")
