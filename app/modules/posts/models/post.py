from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship

from app.db.session import Base, utcnow
from app.modules.posts.likes.models.like import Like
from app.modules.posts.replies.models.reply import Reply

MAX_TEXT_LENGTH = 500

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    author_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    text = Column(String(MAX_TEXT_LENGTH), nullable=False)
    img = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Likes and replies belong to the post: removed with it, ordered like the
    # arrays they replace
    likes = relationship(Like, order_by=Like.created_at, cascade="all, delete-orphan")
    replies = relationship(Reply, order_by=Reply.id, cascade="all, delete-orphan")
