"""Password hashing (bcrypt).

Stored hashes are plain bcrypt strings ($2a$/$2b$), so records written by
other bcrypt implementations verify unchanged. bcrypt.checkpw compares in
constant time.
"""

import bcrypt

# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password.

    A malformed or empty hash never matches.
    """
    if not hashed_password:
        return False
    try:
        result = bcrypt.checkpw(
            plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES],
            hashed_password.encode("utf-8"),
        )
        return bool(result)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str, rounds: int = 12) -> str:
    """Return the bcrypt hash of password."""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8")[:BCRYPT_MAX_BYTES], salt)
    return hashed.decode("utf-8")
