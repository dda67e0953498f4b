from pydantic import BaseModel

from typing import Optional


class SignupRequest(BaseModel):
    username: str
    password: str


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    token: str


class PasswordUpdateRequest(BaseModel):
    password: str


class MessageCreate(BaseModel):
    message: str


class MessageResponse(BaseModel):
    message: str


class UserProfile(BaseModel):
    username: str
    followersCount: int


class RankedUser(BaseModel):
    id: int
    username: str
    followersCount: int


class ErrorResponse(BaseModel):
    message: Optional[str] = None
