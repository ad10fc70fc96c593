"""
Pydantic schemas for Post and Comment entities.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class PostCreate(BaseModel):
    """Schema for post creation."""
    topic: Optional[str] = None
    mood: Optional[str] = None
    image_url: Optional[str] = None


class CommentCreate(BaseModel):
    """Schema for comment creation."""
    content: Optional[str] = None


class AuthorFields(BaseModel):
    """Author display fields joined into posts and comments."""
    user_id: int
    username: Optional[str] = None
    email: Optional[str] = None


class CommentResponse(AuthorFields):
    """Schema for comment response."""
    id: int
    content: str
    created_at: datetime


class PostResponse(AuthorFields):
    """Schema for post response."""
    id: int
    topic: str
    mood: str
    image_url: Optional[str] = None
    content: str
    created_at: datetime


class PostDetailResponse(PostResponse):
    """Post with its comments, newest first."""
    comments: List[CommentResponse] = []


class CreatedResponse(BaseModel):
    """Identifier of a newly created record."""
    id: int
    message: str
