"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the admin auth domain.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel


@dataclass(frozen=True)
class AdminCredentials:
    """Process-wide admin secrets, injected at construction"""

    password: str
    bypass_token: str = ""


class LoginResponse(BaseModel):
    """Response for admin login use case"""

    session_token: str
    expires_at: datetime


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    revoked: bool
