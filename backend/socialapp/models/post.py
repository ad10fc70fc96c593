"""
Post and comment models.
"""
from sqlalchemy import Column, String, Text, ForeignKey, Integer
from socialapp.db.base import BaseModel


class Post(BaseModel):
    """Post with generated content for a topic and mood."""
    __tablename__ = "posts"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    topic = Column(String(255), nullable=False)
    mood = Column(String(50), nullable=False)
    image_url = Column(String(500), nullable=True)
    content = Column(Text, nullable=False)


class Comment(BaseModel):
    """Comment left on a post."""
    __tablename__ = "comments"
    
    # No foreign key constraint: comments are accepted for any post id
    post_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
