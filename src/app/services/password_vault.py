"""
Share Password Vault

Salted, iterated hashing for per-file share passwords.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass

PBKDF2_ITERATIONS = 120_000
SALT_BYTES = 16
KEY_LEN = 64
HASH_ALGO = "sha256"


@dataclass(frozen=True)
class ShareHash:
    hash: str
    salt: str


class SharePasswordVault:
    """
    Derives and verifies share passwords.

    Business Rules:
    - PBKDF2-HMAC-SHA256, 120k iterations, 64-byte key, 16-byte random salt
    - Hash and salt stored hex encoded
    - Verification is constant time and never raises on malformed records
    """

    def __init__(self, iterations: int = PBKDF2_ITERATIONS):
        self.iterations = iterations

    def _derive(self, password: str, salt: str) -> bytes:
        return hashlib.pbkdf2_hmac(
            HASH_ALGO, password.encode(), salt.encode(), self.iterations, KEY_LEN
        )

    def hash(self, password: str) -> ShareHash:
        salt = secrets.token_hex(SALT_BYTES)
        return ShareHash(hash=self._derive(password, salt).hex(), salt=salt)

    def verify(self, password: str, stored_hash: str, stored_salt: str) -> bool:
        if not password or not stored_hash or not stored_salt:
            return False
        try:
            expected = bytes.fromhex(stored_hash)
        except (TypeError, ValueError):
            return False
        if len(expected) != KEY_LEN:
            return False
        derived = self._derive(password, stored_salt)
        return hmac.compare_digest(derived, expected)
