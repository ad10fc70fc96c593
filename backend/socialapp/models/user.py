"""
User model for authentication and profiles.
"""
from sqlalchemy import Column, String
from socialapp.db.base import BaseModel


class User(BaseModel):
    """User account; username is optional but unique when set."""
    __tablename__ = "users"
    
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(50), unique=True, nullable=True, index=True)
    hashed_password = Column(String(255), nullable=False)
