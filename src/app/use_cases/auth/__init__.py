"""
Authentication Use Cases

Admin login, session validation and logout.
"""

from .login_use_case import AdminLoginUseCase
from .validate_session_use_case import ValidateSessionUseCase
from .logout_use_case import LogoutUseCase
from .dtos import AdminCredentials, LoginResponse, LogoutResponse

__all__ = [
    # Use Cases
    "AdminLoginUseCase",
    "ValidateSessionUseCase",
    "LogoutUseCase",
    # DTOs
    "AdminCredentials",
    "LoginResponse",
    "LogoutResponse",
]
