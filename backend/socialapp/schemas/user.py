"""
Pydantic schemas for User entity and authentication.
"""
from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import Optional
from datetime import datetime
from socialapp.core.config import settings


class UserPublic(BaseModel):
    """Public user fields returned alongside a token."""
    id: int
    email: str
    username: Optional[str] = None
    
    class Config:
        from_attributes = True


class UserResponse(UserPublic):
    """Schema for user response."""
    created_at: datetime


class RegisterRequest(BaseModel):
    """Schema for user registration."""
    email: EmailStr
    password: str = Field(
        min_length=settings.PASSWORD_MIN_LENGTH,
        max_length=settings.PASSWORD_MAX_LENGTH,
    )
    confirmPassword: str
    username: Optional[str] = None

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirmPassword:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    """Token plus the public fields of the authenticated user."""
    token: str
    user: UserPublic


class UsernameUpdate(BaseModel):
    """Schema for username update."""
    username: Optional[str] = None
