"""Security: JWT signing and password hashing."""

from app.infrastructure.security.jwt import create_token, decode_token
from app.infrastructure.security.password import get_password_hash, verify_password

__all__ = [
    "create_token",
    "decode_token",
    "get_password_hash",
    "verify_password",
]
