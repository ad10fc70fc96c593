"""
Poke service.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from socialapp.core.exceptions import ValidationError
from socialapp.db.session import commit
from socialapp.models.poke import Poke
from socialapp.schemas.poke import PokeResponse
from socialapp.services.user_service import get_user, load_users

logger = logging.getLogger(__name__)


def create_poke(from_user_id: int, to_user_id: int, db: Session) -> Poke:
    """Record a poke. The target must exist but need not be online."""
    if from_user_id == to_user_id:
        raise ValidationError("Cannot poke yourself")
    get_user(to_user_id, db)

    poke = Poke(from_user_id=from_user_id, to_user_id=to_user_id)
    db.add(poke)
    commit(db)
    db.refresh(poke)

    logger.info(f"User {from_user_id} poked user {to_user_id}")
    return poke


def list_received_pokes(user_id: int, db: Session) -> List[PokeResponse]:
    """Pokes addressed to the user, newest first, with sender fields."""
    pokes = db.query(Poke).filter(
        Poke.to_user_id == user_id
    ).order_by(Poke.created_at.desc(), Poke.id.desc()).all()

    senders = load_users((poke.from_user_id for poke in pokes), db)
    responses = []
    for poke in pokes:
        sender = senders.get(poke.from_user_id)
        responses.append(PokeResponse(
            id=poke.id,
            from_user_id=poke.from_user_id,
            username=sender.username if sender else None,
            email=sender.email if sender else None,
            created_at=poke.created_at
        ))
    return responses
