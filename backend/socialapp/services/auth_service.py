"""
Authentication service: registration, login and token verification.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session
from socialapp.core.exceptions import AuthError, ConflictError
from socialapp.core.security import (
    create_access_token, decode_access_token, get_password_hash, verify_password
)
from socialapp.db.session import commit
from socialapp.models.user import User
from socialapp.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserPublic

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def issue_token(user: User) -> str:
    """Create a signed token carrying the user's id and email."""
    return create_access_token(data={"sub": str(user.id), "user_id": user.id, "email": user.email})


def build_auth_response(user: User) -> AuthResponse:
    return AuthResponse(token=issue_token(user), user=UserPublic.model_validate(user))


def _email_taken(email: str, db: Session) -> bool:
    return db.query(User).filter(User.email == email).first() is not None


def _username_taken(username: str, db: Session) -> bool:
    return db.query(User).filter(User.username == username).first() is not None


def register_user(data: RegisterRequest, db: Session) -> AuthResponse:
    """Create a user account and return a token for it."""
    username = data.username.strip() if data.username else None
    username = username or None

    if _email_taken(data.email, db):
        raise ConflictError("User already exists")
    if username and _username_taken(username, db):
        raise ConflictError("Username already taken")

    user = User(
        email=data.email,
        username=username,
        hashed_password=get_password_hash(data.password)
    )
    db.add(user)
    # Unique indexes catch a concurrent registration racing past the checks
    commit(
        db,
        conflict_message="User already exists",
        constraint_messages={
            "users.username": "Username already taken",
            "ix_users_username": "Username already taken",
        }
    )
    db.refresh(user)

    logger.info(f"Registered user {user.id} ({user.email})")
    return build_auth_response(user)


def login_user(data: LoginRequest, db: Session) -> AuthResponse:
    """Check credentials and return a fresh token."""
    user = db.query(User).filter(User.email == data.email).first()
    if not user or not verify_password(data.password, user.hashed_password):
        raise AuthError(INVALID_CREDENTIALS, status_code=400)
    return build_auth_response(user)


def authenticate(token: Optional[str]) -> int:
    """
    Verify a bearer token and return the user id it was issued for.

    A missing token is a 401; a token that fails to decode, or decodes
    without a usable user id, is a 403.
    """
    if not token:
        raise AuthError("Access token required")

    payload = decode_access_token(token)
    if payload is None:
        raise AuthError("Invalid token", status_code=403)

    user_id = payload.get("user_id")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise AuthError("Invalid token", status_code=403)
    return user_id
