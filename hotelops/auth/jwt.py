"""JWT access-token creation and verification.

Tokens are normally issued by the hotel's auth service and share its signing
key; ``create_access_token`` exists for operators and tests.
"""

from datetime import datetime, timedelta, timezone

from jose import jwt

from hotelops.config import settings


def create_access_token(user_id: str, role: str, expires_delta: timedelta | None = None) -> str:
    """Create a short-lived access token.

    Args:
        user_id: The user's UUID as a string, stored in ``sub``.
        role: The user's role, stored in ``role``.
        expires_delta: Custom expiration duration. Defaults to
            ``settings.jwt_access_token_expire_minutes`` minutes.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes))
    payload = {"sub": user_id, "role": role, "exp": expire, "iat": now, "type": "access"}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and verify a JWT token.

    Raises:
        jose.JWTError: If the token is invalid, expired, or malformed.
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
