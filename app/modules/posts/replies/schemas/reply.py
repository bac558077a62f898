from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class ReplyCreate(BaseModel):
    text: Optional[str] = None

class Reply(BaseModel):
    """Reply entry as embedded in a post"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    user_id: str = Field(alias="userId")
    text: str
    username: Optional[str] = None
    user_profile_pic: Optional[str] = Field(None, alias="userProfilePic")
