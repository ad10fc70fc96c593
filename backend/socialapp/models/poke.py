"""
Poke model.
"""
from sqlalchemy import Column, ForeignKey, Integer, CheckConstraint
from socialapp.db.base import BaseModel


class Poke(BaseModel):
    """One-way poke from one user to another."""
    __tablename__ = "pokes"
    
    from_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    to_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    
    __table_args__ = (
        CheckConstraint("from_user_id <> to_user_id", name="ck_poke_not_self"),
    )
