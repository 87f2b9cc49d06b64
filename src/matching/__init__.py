"""Skill extraction, job matching and recommendations."""
from .recommender import JobRecommender, Recommendation
from .skills import SKILL_KEYWORDS, extract_skills, match_score

__all__ = [
    "SKILL_KEYWORDS",
    "extract_skills",
    "match_score",
    "JobRecommender",
    "Recommendation",
]
