"""
Pydantic schemas for Poke entity.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class PokeResponse(BaseModel):
    """A poke received by the current user, with sender fields."""
    id: int
    from_user_id: int
    username: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime
