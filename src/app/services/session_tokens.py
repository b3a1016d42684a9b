import hashlib
import secrets

SESSION_TOKEN_BYTES = 32  # 256 bits


def generate_session_token() -> str:
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def hash_session_token(token: str) -> str:
    """SHA-256 hex digest; the only form of the token that is persisted."""
    return hashlib.sha256(token.encode()).hexdigest()
