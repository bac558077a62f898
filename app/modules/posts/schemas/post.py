from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from app.modules.posts.replies.schemas.reply import Reply

class PostCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Presence and length are checked by the service so each failure gets its own message
    posted_by: Optional[str] = Field(None, alias="postedBy")
    text: Optional[str] = None
    img: Optional[str] = None

class Post(BaseModel):
    """Post model returned to client"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    posted_by: str = Field(alias="postedBy")
    text: str
    img: Optional[str] = None
    likes: List[str] = []
    replies: List[Reply] = []
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

class PostCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    new_post: Post = Field(alias="newPost")

class PostResponse(BaseModel):
    message: str
    post: Post
