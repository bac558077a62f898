from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower()

class LoginRequest(BaseModel):
    # Older clients send the identifier as "email" or "username"
    identifier: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def login_identifier(self) -> Optional[str]:
        return self.identifier or self.email or self.username

class MessageResponse(BaseModel):
    message: str
