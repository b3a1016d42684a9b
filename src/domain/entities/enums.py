"""
Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class AuthFailureReason(str, Enum):
    """Why an admin login attempt was rejected"""

    invalid_password = "invalid_password"
    missing_password = "missing_password"
    bypass_invalid = "bypass_invalid"
    ip_blocked = "ip_blocked"
    rate_limited = "rate_limited"


class AuditAction(str, Enum):
    """Administrative mutations recorded in the audit log"""

    logout = "logout"
    register_file = "register_file"
    update_global_share_settings = "update_global_share_settings"
    update_project_share_settings = "update_project_share_settings"
    update_file_share_settings = "update_file_share_settings"
    regenerate_share_link = "regenerate_share_link"
    regenerate_project_links = "regenerate_project_links"
