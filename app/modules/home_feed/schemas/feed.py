from typing import List
from pydantic import BaseModel, ConfigDict, Field

from app.modules.posts.schemas.post import Post

class FeedResponse(BaseModel):
    """Feed response model returned to client"""
    model_config = ConfigDict(populate_by_name=True)

    feed_posts: List[Post] = Field(alias="feedPosts")
