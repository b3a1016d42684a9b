"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import AuditAction, AuthFailureReason

# Export all entities
from .admin_session import AdminSession
from .login_attempt import LoginAttempt
from .audit_event import AuditEvent
from .project import Project
from .file import File
from .share_password import SharePassword
from .share_settings import (
    GlobalShareSettings,
    ProjectShareSettings,
    FileShareSettings,
)
from .download_log import DownloadLog

__all__ = [
    # Enums
    "AuditAction",
    "AuthFailureReason",
    # Entities
    "AdminSession",
    "LoginAttempt",
    "AuditEvent",
    "Project",
    "File",
    "SharePassword",
    "GlobalShareSettings",
    "ProjectShareSettings",
    "FileShareSettings",
    "DownloadLog",
]
