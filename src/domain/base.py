import secrets
from datetime import datetime, timezone

PUBLIC_ID_BYTES = 16


def generate_public_id() -> str:
    """Unguessable share-link key (128 bits, URL-safe, 22 chars)."""
    return secrets.token_urlsafe(PUBLIC_ID_BYTES)


def utc_now() -> datetime:
    """Naive UTC timestamp, matching how DateTime columns are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
