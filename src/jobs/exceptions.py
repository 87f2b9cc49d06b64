"""Job posting exceptions."""
from src.errors import JobNetError


class JobError(JobNetError):
    """Base exception for job posting errors."""

    pass


class InvalidJobError(JobError):
    """Raised when a posting has a missing or out-of-range field."""

    pass


class JobNotFoundError(JobError):
    """Raised when a job id does not resolve to a posting."""

    status_code = 404

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__("Job not found")


class JobClosedError(JobError):
    """Raised when applying to a job that is not active."""

    status_code = 409

    def __init__(self, job_id: str, status: str):
        self.job_id = job_id
        self.status = status
        super().__init__(f"Job is {status}")


class PaymentRequiredError(JobError):
    """Raised when the platform fee transaction hash is missing."""

    status_code = 402

    def __init__(self, fee: float):
        self.fee = fee
        super().__init__(f"Platform fee of {fee} SOL is required to post a job")
