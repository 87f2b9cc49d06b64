"""Authentication exceptions for JobNet."""
from src.errors import JobNetError


class AuthenticationError(JobNetError):
    """Base exception for authentication errors."""

    pass


class DuplicateEmailError(AuthenticationError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists")


class WeakPasswordError(AuthenticationError):
    """Raised when password doesn't meet requirements."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Password too weak: {reason}")


class InvalidEmailError(AuthenticationError):
    """Raised when email format is invalid."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid email format: {email}")


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid."""

    def __init__(self):
        super().__init__("Invalid credentials")


class MissingTokenError(AuthenticationError):
    """Raised when a protected route is called without a bearer token."""

    status_code = 401

    def __init__(self):
        super().__init__("Access token required")


class InvalidTokenError(AuthenticationError):
    """Raised when an access token is malformed, forged or expired."""

    status_code = 403

    def __init__(self):
        super().__init__("Invalid token")


class UserNotFoundError(AuthenticationError):
    """Raised when a user id does not resolve to an account."""

    status_code = 404

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("User not found")


class RateLimitExceededError(AuthenticationError):
    """Raised when a client exceeds the auth endpoint rate limit."""

    status_code = 429

    def __init__(self, retry_after: int):
        self.retry_after = retry_after
        super().__init__(f"Too many attempts, retry in {retry_after}s")
