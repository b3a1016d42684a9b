"""
Share Access DTOs
"""

from typing import Optional

from pydantic import BaseModel


class ShareAccessGranted(BaseModel):
    """Outcome of a granted download: where to redirect the caller"""

    file_id: str
    redirect_url: str
    original_filename: str
    replayed: bool = False
    request_id: Optional[str] = None
