"""
Profile routes for the authenticated user.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from socialapp.db.session import get_db
from socialapp.schemas.common import MessageResponse
from socialapp.schemas.poke import PokeResponse
from socialapp.schemas.user import UserResponse, UsernameUpdate
from socialapp.services import poke_service, user_service
from socialapp.api.dependencies import get_current_user_id

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=UserResponse)
def get_profile(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get current user information."""
    return user_service.get_user(user_id, db)


@router.put("/username", response_model=MessageResponse)
def update_username(
    update: UsernameUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Change the current user's username."""
    user_service.update_username(user_id, update.username, db)
    return MessageResponse(message="Username updated successfully")


@router.get("/pokes", response_model=List[PokeResponse])
def list_pokes(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get pokes received by the current user, newest first."""
    return poke_service.list_received_pokes(user_id, db)
