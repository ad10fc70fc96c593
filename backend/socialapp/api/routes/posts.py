"""
Post and comment routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from socialapp.db.session import get_db
from socialapp.schemas.post import (
    CommentCreate, CreatedResponse, PostCreate, PostDetailResponse, PostResponse
)
from socialapp.services import post_service
from socialapp.api.dependencies import get_current_user_id

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=List[PostResponse])
def list_posts(db: Session = Depends(get_db)):
    """Get all posts, newest first."""
    return post_service.list_posts(db)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a post with generated content."""
    post = post_service.create_post(
        user_id,
        post_data.topic,
        post_data.mood,
        db,
        image_url=post_data.image_url
    )
    return CreatedResponse(id=post.id, message="Post created successfully")


@router.get("/{post_id}", response_model=PostDetailResponse)
def get_post(post_id: int, db: Session = Depends(get_db)):
    """Get a post with its comments."""
    return post_service.get_post(post_id, db)


@router.post("/{post_id}/comments", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_comment(
    post_id: int,
    comment_data: CommentCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Add a comment to a post."""
    comment = post_service.add_comment(user_id, post_id, comment_data.content, db)
    return CreatedResponse(id=comment.id, message="Comment added successfully")
