"""Models package - Import all models for SQLAlchemy registration."""
from socialapp.models.user import User
from socialapp.models.post import Post, Comment
from socialapp.models.poke import Poke

__all__ = [
    "User",
    "Post",
    "Comment",
    "Poke",
]
