"""
Audit Use Cases

Login attempt and admin mutation listings.
"""

from .get_auth_events_use_case import GetAuthEventsUseCase
from .get_audit_events_use_case import GetAuditEventsUseCase

__all__ = [
    "GetAuthEventsUseCase",
    "GetAuditEventsUseCase",
]
