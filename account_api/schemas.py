from pydantic import BaseModel, ConfigDict, Field

from typing import Optional


class UserCreate(BaseModel):
    username: str
    password: str
    role: Optional[str] = None


class UserLogin(BaseModel):
    username: str
    password: str


class Token(BaseModel):
    token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str


class CurrentUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    username: str


class UserSummary(BaseModel):
    id: int
    username: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class TokenClaims(BaseModel):
    """Claims carried by a verified access token."""
    sub: str
    username: str
    role: str
