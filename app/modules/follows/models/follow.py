from sqlalchemy import Column, String, DateTime, ForeignKey, CheckConstraint

from app.db.session import Base, utcnow

# One row per directed edge: follower_id follows followee_id.
# The follower's "following" and the followee's "followers" are both read
# from this row, so the two sides can never disagree.
class Follow(Base):
    __tablename__ = "follows"

    follower_id = Column(String, ForeignKey("users.id"), primary_key=True, index=True)
    followee_id = Column(String, ForeignKey("users.id"), primary_key=True, index=True)
    created_at = Column(DateTime, default=utcnow)

    __table_args__ = (
        CheckConstraint("follower_id != followee_id", name="no_self_follow"),
    )
