"""Pydantic schemas for registration, login, and user views.

Learn: Request fields are all optional here. Presence, email shape and
password length are checked by AuthService, so clients get the API's own
400 messages ("Please provide all required fields", ...) instead of
FastAPI's generic 422 payload.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    username: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    username: Optional[str] = None  # username OR email
    password: Optional[str] = None


class UserPublic(BaseModel):
    """Sanitized user view — never includes the password hash."""

    id: uuid.UUID
    username: str
    name: str
    email: Optional[str] = None

    model_config = {"from_attributes": True}


class UserProfile(UserPublic):
    """Full user record minus password hash and version counter."""

    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str


class AuthResponse(MessageResponse):
    user: UserPublic
