"""Job posting service."""
import logging
from typing import Optional, Sequence

from sqlalchemy import exists, func, or_, select
from sqlalchemy.orm import Session, selectinload

from config.settings import settings
from src.jobs.exceptions import (
    InvalidJobError,
    JobClosedError,
    JobNotFoundError,
    PaymentRequiredError,
)
from src.matching.recommender import JobRecommender, Recommendation
from src.persistence.models import EXPERIENCE_LEVELS, JOB_TYPES, Job, User

logger = logging.getLogger(__name__)


def escape_like(value: str) -> str:
    """Escape special LIKE characters (\\, %, _) in user input."""
    return value.replace("\\", r"\\").replace("%", r"\%").replace("_", r"\_")


def _contains(column, term: str):
    return column.ilike(f"%{escape_like(term)}%", escape="\\")


def _any_skill_contains(dialect: str, term: str):
    """EXISTS over the elements of Job.skills, one LIKE per skill."""
    if dialect == "postgresql":
        elements = func.json_array_elements_text(Job.skills).table_valued("value")
    else:
        elements = func.json_each(Job.skills).table_valued("value")
    return exists(
        select(1).select_from(elements).where(_contains(elements.c.value, term))
    )


class JobService:
    """Service for posting, searching and recommending jobs."""

    def __init__(self, session: Session):
        """
        Initialize job service.

        Args:
            session: Database session
        """
        self.session = session

    def list_jobs(
        self,
        limit: int = 10,
        page: int = 1,
        search: Optional[str] = None,
        location: Optional[str] = None,
        min_budget: Optional[float] = None,
        skills: Optional[str] = None,
    ) -> tuple[list[Job], int]:
        """
        List active jobs, newest first.

        Args:
            limit: Page size
            page: 1-based page number
            search: Case-insensitive text found in title, description or skills
            location: Case-insensitive text found in location
            min_budget: Minimum budget (inclusive)
            skills: Case-insensitive text found in any skill

        Returns:
            (jobs on the requested page, total matching jobs)
        """
        limit = max(1, limit)
        page = max(1, page)

        dialect = self.session.get_bind().dialect.name
        filters = [Job.status == "active"]
        if search:
            filters.append(
                or_(
                    _contains(Job.title, search),
                    _contains(Job.description, search),
                    _any_skill_contains(dialect, search),
                )
            )
        if location:
            filters.append(_contains(Job.location, location))
        if min_budget is not None:
            filters.append(Job.budget >= min_budget)
        if skills:
            filters.append(_any_skill_contains(dialect, skills))

        total = self.session.execute(
            select(func.count()).select_from(Job).where(*filters)
        ).scalar_one()

        stmt = (
            select(Job)
            .where(*filters)
            .options(selectinload(Job.posted_by), selectinload(Job.applicants))
            .order_by(Job.created_at.desc())
            .limit(limit)
            .offset((page - 1) * limit)
        )
        jobs = list(self.session.execute(stmt).scalars().all())
        return jobs, total

    def get_job(self, job_id: str) -> Optional[Job]:
        """Get a job by ID."""
        return self.session.get(Job, job_id)

    def require_job(self, job_id: str) -> Job:
        """Get a job by ID or raise JobNotFoundError."""
        job = self.get_job(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    def create_job(
        self,
        posted_by_id: str,
        title: str,
        description: str,
        budget: float,
        location: Optional[str] = None,
        skills: Optional[Sequence[str]] = None,
        job_type: str = "full-time",
        experience_level: str = "intermediate",
        payment_tx_hash: Optional[str] = None,
    ) -> Job:
        """
        Create an active job posting.

        Raises:
            InvalidJobError: If a required field is blank or an enum is unknown
            PaymentRequiredError: If the platform fee is enforced and no
                transaction hash was supplied
        """
        if not title or not title.strip():
            raise InvalidJobError("Title is required")
        if not description or not description.strip():
            raise InvalidJobError("Description is required")
        if budget is None or budget < 0:
            raise InvalidJobError("Budget must be a non-negative number")
        if job_type not in JOB_TYPES:
            raise InvalidJobError(f"Unknown job type: {job_type}")
        if experience_level not in EXPERIENCE_LEVELS:
            raise InvalidJobError(f"Unknown experience level: {experience_level}")
        if settings.require_platform_fee and not payment_tx_hash:
            raise PaymentRequiredError(settings.platform_fee_sol)

        job = Job(
            title=title.strip(),
            description=description,
            budget=budget,
            location=location,
            skills=[s.strip() for s in (skills or []) if s and s.strip()],
            job_type=job_type,
            experience_level=experience_level,
            posted_by_id=posted_by_id,
            payment_tx_hash=payment_tx_hash,
            status="active",
        )
        self.session.add(job)
        self.session.commit()
        self.session.refresh(job)

        logger.info("Job %s posted by %s", job.id, posted_by_id)
        return job

    def apply(self, job_id: str, user_id: str) -> Job:
        """
        Add a user to a job's applicants (idempotent).

        Raises:
            JobNotFoundError: If the job doesn't exist
            JobClosedError: If the job is not active
        """
        job = self.require_job(job_id)
        if job.status != "active":
            raise JobClosedError(job_id, job.status)

        user = self.session.get(User, user_id)
        if user is not None and user not in job.applicants:
            job.applicants.append(user)
            self.session.commit()
        return job

    def recommendations_for(
        self,
        user: User,
        recommender: Optional[JobRecommender] = None,
        pool_size: Optional[int] = None,
    ) -> list[Recommendation]:
        """
        Rank the newest active jobs against a user's skills.

        Returns:
            Ranked recommendations; empty if the user has no skills
        """
        if not user.skills:
            return []

        recommender = recommender or JobRecommender(
            min_score=settings.recommendation_min_score,
            limit=settings.recommendation_limit,
        )
        stmt = (
            select(Job)
            .where(Job.status == "active")
            .options(selectinload(Job.posted_by), selectinload(Job.applicants))
            .order_by(Job.created_at.desc())
            .limit(pool_size or settings.recommendation_pool_size)
        )
        pool = self.session.execute(stmt).scalars().all()
        return recommender.recommend(user.skills, pool)
