from typing import Any, List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidatorFunctionWrapHandler, field_validator

class UserBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

class PublicProfile(UserBase):
    """User fields returned after signup and login"""
    id: str
    name: str
    email: str
    username: str
    bio: str = ""
    profile_pic: str = Field("", alias="profilePic")

class Profile(PublicProfile):
    """Full profile: public fields plus the follow graph"""
    followers: List[str] = []
    following: List[str] = []
    created_at: datetime = Field(alias="createdAt")

class UserUpdate(UserBase):
    # Only keys present in the request body are applied
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    username: Optional[str] = None
    password: Optional[str] = None
    bio: Optional[str] = None
    profile_pic: Optional[str] = Field(None, alias="profilePic")

    @field_validator("email", mode="wrap")
    @classmethod
    def normalize_email(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Optional[str]:
        # A blank email skips format validation so update_user can reject it by name
        if v == "":
            return v
        value = handler(v)
        return value.lower() if value else value

class UserUpdateResponse(BaseModel):
    message: str
    user: Profile
