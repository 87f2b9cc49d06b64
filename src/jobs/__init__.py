"""Job postings."""
from .exceptions import (
    InvalidJobError,
    JobClosedError,
    JobError,
    JobNotFoundError,
    PaymentRequiredError,
)
from .service import JobService

__all__ = [
    "JobService",
    "JobError",
    "InvalidJobError",
    "JobNotFoundError",
    "JobClosedError",
    "PaymentRequiredError",
]
