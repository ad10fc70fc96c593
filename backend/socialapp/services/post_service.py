"""
Post service for feed reads, post creation and comments.

Author fields are joined by a secondary lookup on ``user_id`` after the
primary fetch.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from socialapp.core.exceptions import NotFoundError, ValidationError
from socialapp.db.session import commit
from socialapp.models.post import Comment, Post
from socialapp.models.user import User
from socialapp.schemas.post import CommentResponse, PostDetailResponse, PostResponse
from socialapp.services.content_generator import generate_post_content
from socialapp.services.user_service import load_users

logger = logging.getLogger(__name__)


def _author_fields(author: Optional[User]) -> dict:
    if author is None:
        return {"username": None, "email": None}
    return {"username": author.username, "email": author.email}


def _post_response(post: Post, author: Optional[User]) -> PostResponse:
    return PostResponse(
        id=post.id,
        user_id=post.user_id,
        topic=post.topic,
        mood=post.mood,
        image_url=post.image_url,
        content=post.content,
        created_at=post.created_at,
        **_author_fields(author)
    )


def list_posts(db: Session) -> List[PostResponse]:
    """All posts, newest first."""
    posts = db.query(Post).order_by(Post.created_at.desc(), Post.id.desc()).all()
    authors = load_users((post.user_id for post in posts), db)
    return [_post_response(post, authors.get(post.user_id)) for post in posts]


def get_post(post_id: int, db: Session) -> PostDetailResponse:
    """A single post with its comments, newest first."""
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise NotFoundError("Post not found")

    comments = db.query(Comment).filter(
        Comment.post_id == post_id
    ).order_by(Comment.created_at.desc(), Comment.id.desc()).all()

    user_ids = {post.user_id} | {comment.user_id for comment in comments}
    users = load_users(user_ids, db)

    comment_responses = [
        CommentResponse(
            id=comment.id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
            **_author_fields(users.get(comment.user_id))
        )
        for comment in comments
    ]

    base = _post_response(post, users.get(post.user_id))
    return PostDetailResponse(**base.model_dump(), comments=comment_responses)


def create_post(
    user_id: int,
    topic: Optional[str],
    mood: Optional[str],
    db: Session,
    image_url: Optional[str] = None
) -> Post:
    """Create a post whose content is generated from topic and mood."""
    if not topic or not mood:
        raise ValidationError("Topic and mood are required")

    post = Post(
        user_id=user_id,
        topic=topic,
        mood=mood,
        image_url=image_url or None,
        content=generate_post_content(topic, mood)
    )
    db.add(post)
    commit(db)
    db.refresh(post)

    logger.info(f"User {user_id} created post {post.id} ({topic!r}, {mood!r})")
    return post


def add_comment(user_id: int, post_id: int, content: Optional[str], db: Session) -> Comment:
    """
    Add a comment to a post.

    The post id is stored as given; its existence is not checked.
    """
    text = (content or "").strip()
    if not text:
        raise ValidationError("Comment content is required")

    comment = Comment(post_id=post_id, user_id=user_id, content=text)
    db.add(comment)
    commit(db)
    db.refresh(comment)
    return comment
