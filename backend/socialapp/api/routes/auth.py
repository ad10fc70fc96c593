"""
Authentication routes for registration and login.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from socialapp.db.session import get_db
from socialapp.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from socialapp.services.auth_service import login_user, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Register a new user and return a token."""
    return register_user(user_data, db)


@router.post("/login", response_model=AuthResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Login with email and password and get a token."""
    return login_user(credentials, db)
