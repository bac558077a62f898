from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey

from app.db.session import Base, utcnow

class Reply(Base):
    __tablename__ = "replies"

    # Autoincrement id doubles as the append order of a post's replies
    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(String, ForeignKey("posts.id"), index=True, nullable=False)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    text = Column(Text, nullable=False)
    # Author display fields as they were when the reply was written
    username = Column(String)
    user_profile_pic = Column(String)
    created_at = Column(DateTime, default=utcnow)
