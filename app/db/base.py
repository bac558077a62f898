# Import all models here so metadata.create_all and Alembic can see them
from app.db.session import Base

from app.modules.user_management.models.user import User
from app.modules.follows.models.follow import Follow
from app.modules.posts.models.post import Post
from app.modules.posts.likes.models.like import Like
from app.modules.posts.replies.models.reply import Reply
