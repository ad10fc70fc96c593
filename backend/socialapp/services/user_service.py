"""
User service for profile reads and username updates.
"""
import logging
from typing import Dict, Iterable, List
from sqlalchemy.orm import Session
from socialapp.core.exceptions import ConflictError, NotFoundError, ValidationError
from socialapp.db.session import commit
from socialapp.models.user import User

logger = logging.getLogger(__name__)


def load_users(user_ids: Iterable[int], db: Session) -> Dict[int, User]:
    """Fetch users by id in one query, keyed by id."""
    ids = set(user_ids)
    if not ids:
        return {}
    users = db.query(User).filter(User.id.in_(ids)).all()
    return {user.id: user for user in users}


def list_users(db: Session) -> List[User]:
    """All users in registration order."""
    return db.query(User).order_by(User.created_at.asc(), User.id.asc()).all()


def get_user(user_id: int, db: Session) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def _username_taken_by_other(username: str, user_id: int, db: Session) -> bool:
    return db.query(User).filter(
        User.username == username,
        User.id != user_id
    ).first() is not None


def update_username(user_id: int, new_username: str, db: Session) -> User:
    """
    Set a user's username.

    The uniqueness check and the write are not atomic; the unique index on
    ``users.username`` turns a lost race into a ConflictError on commit.
    """
    username = (new_username or "").strip()
    if not username:
        raise ValidationError("Username is required")

    if _username_taken_by_other(username, user_id, db):
        raise ConflictError("Username already taken")

    user = get_user(user_id, db)
    user.username = username
    commit(db, conflict_message="Username already taken")
    db.refresh(user)

    logger.info(f"User {user_id} changed username to {username!r}")
    return user
