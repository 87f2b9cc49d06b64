"""Signed access tokens (HS256 JWT)."""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from config.settings import settings
from src.auth.exceptions import InvalidTokenError
from src.persistence.models import User

ALGORITHM = "HS256"


def issue_token(
    user: User,
    secret: Optional[str] = None,
    expires_in: Optional[timedelta] = None,
) -> str:
    """
    Create an access token for a user.

    The payload carries ``userId`` and ``email``, the claim names the
    browser client reads.

    Args:
        user: Authenticated user
        secret: Signing secret (defaults to settings.jwt_secret)
        expires_in: Token lifetime (defaults to settings.jwt_expiry_days)

    Returns:
        Encoded JWT string
    """
    lifetime = expires_in if expires_in is not None else timedelta(days=settings.jwt_expiry_days)
    payload = {
        "userId": user.id,
        "email": user.email,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(payload, secret or settings.jwt_secret, algorithm=ALGORITHM)


def decode_token(token: str, secret: Optional[str] = None) -> dict:
    """
    Verify a token and return its payload.

    Raises:
        InvalidTokenError: If the token is expired, forged or lacks a user id
    """
    try:
        payload = jwt.decode(token, secret or settings.jwt_secret, algorithms=[ALGORITHM])
    except jwt.InvalidTokenError as e:  # ExpiredSignatureError is a subclass
        raise InvalidTokenError() from e

    if "userId" not in payload:
        raise InvalidTokenError()
    return payload
