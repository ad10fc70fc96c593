"""
Public user routes and pokes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from fastapi.concurrency import run_in_threadpool
from typing import List
from socialapp.db.session import get_db
from socialapp.realtime.relay import RealtimeRelay
from socialapp.schemas.common import MessageResponse
from socialapp.schemas.user import UserResponse
from socialapp.services import poke_service, user_service
from socialapp.api.dependencies import get_current_user_id, get_relay

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    """Get all users."""
    return user_service.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get user by ID."""
    return user_service.get_user(user_id, db)


@router.post("/{user_id}/poke", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def poke_user(
    user_id: int,
    current_user_id: int = Depends(get_current_user_id),
    relay: RealtimeRelay = Depends(get_relay),
    db: Session = Depends(get_db)
):
    """Poke a user and alert every connected realtime client."""
    poke = await run_in_threadpool(poke_service.create_poke, current_user_id, user_id, db)
    await relay.publish_poke(poke.from_user_id, poke.to_user_id)
    return MessageResponse(message="Poke sent successfully")
