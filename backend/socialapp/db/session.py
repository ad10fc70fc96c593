"""
Database session management.
"""
import logging
from typing import Dict, Optional
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from socialapp.core.config import settings
from socialapp.core.exceptions import ConflictError, InternalError
from socialapp.db.base import Base

logger = logging.getLogger(__name__)

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # Sessions are handed across the threadpool FastAPI runs sync code in
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database tables."""
    # Register every model on Base.metadata before create_all
    import socialapp.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


def _conflict_message(
    exc: IntegrityError,
    default: str,
    constraint_messages: Optional[Dict[str, str]]
) -> str:
    # SQLite: "UNIQUE constraint failed: users.username", MySQL: "... for key 'ix_users_username'"
    detail = str(exc.orig).lower()
    for fragment, message in (constraint_messages or {}).items():
        if fragment in detail:
            return message
    return default


def commit(
    db: Session,
    conflict_message: str = "Already exists",
    constraint_messages: Optional[Dict[str, str]] = None
) -> None:
    """
    Commit the session, mapping integrity failures onto ConflictError
    and any other database failure onto InternalError.

    ``constraint_messages`` maps fragments of the driver error (the
    failing column or index name) onto a more specific conflict message.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"Integrity error on commit: {exc.orig}")
        raise ConflictError(_conflict_message(exc, conflict_message, constraint_messages)) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Database error on commit: {exc}", exc_info=True)
        raise InternalError() from exc
