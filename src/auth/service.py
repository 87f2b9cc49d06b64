"""Authentication service for JobNet accounts."""
import logging
import re
from typing import Optional

import bcrypt
from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from config.settings import settings
from src.auth.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidEmailError,
    UserNotFoundError,
    WeakPasswordError,
)
from src.errors import MissingFieldError
from src.persistence.models import User

logger = logging.getLogger(__name__)

# Email validation regex
EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# Fields a user may change through the profile endpoint
PROFILE_FIELDS = ("name", "bio", "location", "linkedin_url", "skills", "wallet_address")


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt work factor (defaults to settings.bcrypt_rounds)

    Returns:
        Bcrypt hash string
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Verify a password against a bcrypt hash.

    Args:
        password: Plain text password to verify
        hashed: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class AuthService:
    """
    Account management.

    Handles:
    - Registration with name/email/password
    - Login
    - Profile reads and updates
    """

    # Password requirements
    MIN_PASSWORD_LENGTH = 8

    def __init__(self, session: Session):
        """
        Initialize auth service with database session.

        Args:
            session: SQLAlchemy database session
        """
        self.session = session

    def register(self, name: str, email: str, password: str) -> User:
        """
        Register a new user.

        Args:
            name: Display name
            email: User's email address
            password: Plain text password (will be hashed)

        Returns:
            Created User object

        Raises:
            MissingFieldError: If name is blank
            InvalidEmailError: If email format is invalid
            WeakPasswordError: If password is too short
            DuplicateEmailError: If email already exists
        """
        if not name or not name.strip():
            raise MissingFieldError("name", "Name is required")

        if not self._is_valid_email(email):
            raise InvalidEmailError(email)

        self._validate_password(password)

        if self.get_user_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = User(
            name=name.strip(),
            email=email.lower().strip(),
            password_hash=hash_password(password),
            skills=[],
        )
        self.session.add(user)
        self.session.commit()

        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Authenticate a user with email and password.

        Raises:
            InvalidCredentialsError: If email or password is incorrect
        """
        user = self.get_user_by_email(email or "")
        if user is None:
            raise InvalidCredentialsError()

        if not verify_password(password or "", user.password_hash):
            raise InvalidCredentialsError()

        return user

    def get_user(self, user_id: str) -> Optional[User]:
        """Get a user by ID."""
        return self.session.get(User, user_id)

    def require_user(self, user_id: str) -> User:
        """Get a user by ID or raise UserNotFoundError."""
        user = self.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def update_profile(self, user_id: str, **fields) -> User:
        """
        Update profile fields.

        Only keys in PROFILE_FIELDS are applied; keys passed as None are
        left untouched.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        user = self.require_user(user_id)

        for key in PROFILE_FIELDS:
            value = fields.get(key)
            if value is None:
                continue
            if key == "name" and not value.strip():
                raise MissingFieldError("name", "Name is required")
            setattr(user, key, list(value) if key == "skills" else value)

        self.session.commit()
        return user

    def view_profile(self, user_id: str) -> User:
        """Return a public profile and count the view."""
        result = self.session.execute(
            update(User)
            .where(User.id == user_id)
            .values(profile_views=func.coalesce(User.profile_views, 0) + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise UserNotFoundError(user_id)
        self.session.commit()

        user = self.require_user(user_id)
        self.session.refresh(user)
        return user

    def _is_valid_email(self, email: str) -> bool:
        """Check if email format is valid."""
        if not email or not isinstance(email, str):
            return False
        return EMAIL_REGEX.match(email.strip()) is not None

    def _validate_password(self, password: str) -> None:
        """
        Validate password meets requirements.

        Raises:
            WeakPasswordError: If password is shorter than MIN_PASSWORD_LENGTH
        """
        if not password or len(password) < self.MIN_PASSWORD_LENGTH:
            raise WeakPasswordError(
                f"Password must be at least {self.MIN_PASSWORD_LENGTH} characters"
            )

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        stmt = select(User).where(User.email == email.lower().strip())
        return self.session.execute(stmt).scalar_one_or_none()
