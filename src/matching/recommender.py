"""Job recommendation ranking."""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from src.matching.skills import match_score

logger = logging.getLogger(__name__)

REASON_TEMPLATE = "Matches {score}% of your skills"


@dataclass
class Recommendation:
    """A job with its match score and the reason shown to the user."""

    job: Any
    score: int

    @property
    def reason(self) -> str:
        return REASON_TEMPLATE.format(score=self.score)


class JobRecommender:
    """Score jobs against one user's skills and keep the best few."""

    def __init__(self, min_score: int = 30, limit: int = 5):
        """
        Initialize recommender.

        Args:
            min_score: Jobs scoring at or below this are dropped
            limit: Maximum recommendations kept
        """
        self.min_score = min_score
        self.limit = limit

    def score_jobs(self, user_skills: Sequence[str], jobs: Iterable[Any]) -> list[Recommendation]:
        """Score every job (anything with a ``skills`` attribute), unfiltered."""
        return [
            Recommendation(job=job, score=match_score(user_skills, job.skills or []))
            for job in jobs
        ]

    def rank(self, scored: Iterable[Recommendation]) -> list[Recommendation]:
        """
        Filter and order already-scored jobs.

        Keeps scores strictly above min_score, sorts by score descending
        (ties keep their input order) and truncates to limit.
        """
        kept = [r for r in scored if r.score > self.min_score]
        kept.sort(key=lambda r: r.score, reverse=True)
        return kept[: self.limit]

    def recommend(self, user_skills: Sequence[str], jobs: Iterable[Any]) -> list[Recommendation]:
        """Score then rank; empty when the user has no skills."""
        if not user_skills:
            return []
        ranked = self.rank(self.score_jobs(user_skills, jobs))
        logger.debug("Ranked %d recommendations", len(ranked))
        return ranked
