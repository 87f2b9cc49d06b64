"""Authentication module for JobNet."""
from src.auth.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidTokenError,
    MissingTokenError,
    RateLimitExceededError,
    UserNotFoundError,
    WeakPasswordError,
)
from src.auth.rate_limit import RateLimiter
from src.auth.service import AuthService, hash_password, verify_password
from src.auth.tokens import decode_token, issue_token

__all__ = [
    "AuthService",
    "RateLimiter",
    "hash_password",
    "verify_password",
    "issue_token",
    "decode_token",
    "AuthenticationError",
    "DuplicateEmailError",
    "WeakPasswordError",
    "InvalidEmailError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
    "UserNotFoundError",
    "RateLimitExceededError",
]
