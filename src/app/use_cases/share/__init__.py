"""
Share Use Cases

Public download authorization.
"""

from .resolve_share_access_use_case import ResolveShareAccessUseCase
from .dtos import ShareAccessGranted

__all__ = [
    "ResolveShareAccessUseCase",
    "ShareAccessGranted",
]
