"""Base exception for JobNet domain errors."""


class JobNetError(Exception):
    """Base exception for errors surfaced to API clients.

    Subclasses set ``status_code``; the API layer turns any JobNetError
    into ``{"message": str(error)}`` with that HTTP status.
    """

    status_code = 400


class MissingFieldError(JobNetError):
    """Raised when a required field is absent or blank."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} is required")
