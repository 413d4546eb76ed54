"""JWT token creation and verification.

Uses app.core.config for the default secret and algorithm; callers holding
their own Settings pass secret_key/algorithm explicitly.
"""

from datetime import timedelta
from typing import Any, cast

from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import get_settings
from app.domain.exceptions import UnauthorizedError
from app.shared.utils.datetime import utc_now


def _signing_params(
    secret_key: str | None, algorithm: str | None
) -> tuple[str, str]:
    if secret_key is not None and algorithm is not None:
        return secret_key, algorithm
    settings = get_settings()
    return (
        secret_key if secret_key is not None else settings.secret_key.get_secret_value(),
        algorithm if algorithm is not None else settings.algorithm,
    )


def create_token(
    payload: dict[str, Any],
    expires_delta: timedelta,
    *,
    secret_key: str | None = None,
    algorithm: str | None = None,
) -> str:
    """Sign payload as a JWT that expires after expires_delta.

    Adds iat and exp claims; the caller's dict is not modified.

    Args:
        payload: Claims to encode (user projection for access, id for refresh).
        expires_delta: Validity window.
        secret_key: Signing secret; defaults to settings.secret_key.
        algorithm: JWS algorithm; defaults to settings.algorithm.

    Returns:
        Encoded JWT string.
    """
    key, alg = _signing_params(secret_key, algorithm)
    now = utc_now()
    to_encode = payload.copy()
    to_encode["iat"] = now
    to_encode["exp"] = now + expires_delta
    encoded = jwt.encode(to_encode, key, algorithm=alg)
    return cast(str, encoded)


def decode_token(
    token: str,
    *,
    secret_key: str | None = None,
    algorithm: str | None = None,
) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    No route consumes bearer tokens yet; this is the verification half used
    by the test suite to check what login issued.

    Raises:
        UnauthorizedError: If the token is malformed, badly signed, expired,
            or has no exp claim.
    """
    key, alg = _signing_params(secret_key, algorithm)
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[alg],
            options={"require_exp": True},
        )
    except ExpiredSignatureError as e:
        raise UnauthorizedError("Token has expired") from e
    except JWTError as e:
        raise UnauthorizedError(f"Invalid token: {e!s}") from e
    return payload
