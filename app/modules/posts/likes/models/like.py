from sqlalchemy import Column, String, DateTime, ForeignKey

from app.db.session import Base, utcnow

class Like(Base):
    __tablename__ = "likes"

    post_id = Column(String, ForeignKey("posts.id"), primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), primary_key=True)
    created_at = Column(DateTime, default=utcnow)
