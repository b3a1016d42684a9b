"""
Use Cases

Organized into domain folders:
- auth/: Admin login, session validation, logout
- share/: Public download authorization
- settings/: Share settings tiers
- files/: Upload registration, share link regeneration
- audit/: Auth event and admin audit listings

Import from subdirectories for better organization.
"""

from .auth import AdminLoginUseCase, LogoutUseCase, ValidateSessionUseCase
from .share import ResolveShareAccessUseCase
from .settings import ShareSettingsUseCase
from .files import RegenerateShareLinkUseCase, RegisterFileUseCase
from .audit import GetAuditEventsUseCase, GetAuthEventsUseCase

__all__ = [
    # Auth
    "AdminLoginUseCase",
    "LogoutUseCase",
    "ValidateSessionUseCase",
    # Share
    "ResolveShareAccessUseCase",
    # Settings
    "ShareSettingsUseCase",
    # Files
    "RegenerateShareLinkUseCase",
    "RegisterFileUseCase",
    # Audit
    "GetAuditEventsUseCase",
    "GetAuthEventsUseCase",
]
