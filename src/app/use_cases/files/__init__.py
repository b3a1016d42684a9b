"""
File Use Cases

Upload registration and share link management.
"""

from .register_file_use_case import RegisterFileUseCase
from .regenerate_share_link_use_case import RegenerateShareLinkUseCase
from .dtos import FileInfo, RegenerateLinksResponse, RegeneratedLink, RegisterFileCommand

__all__ = [
    "RegisterFileUseCase",
    "RegenerateShareLinkUseCase",
    "FileInfo",
    "RegenerateLinksResponse",
    "RegeneratedLink",
    "RegisterFileCommand",
]
