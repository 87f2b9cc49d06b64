"""Skill keyword extraction and skill-overlap scoring.

Both functions are plain substring scans: there is no tokenization and no
word-boundary check, so "go" is found inside "golang" and "java" inside
"javascript". Callers rely on this exact behavior.
"""
import math
from typing import Sequence

# Recognized skill keywords, in the order results are reported
SKILL_KEYWORDS: tuple[str, ...] = (
    "javascript", "python", "java", "react", "node.js", "angular", "vue.js",
    "html", "css", "typescript", "php", "ruby", "go", "rust", "swift",
    "kotlin", "c++", "c#", "sql", "mongodb", "postgresql", "mysql",
    "aws", "azure", "gcp", "docker", "kubernetes", "git", "linux",
    "machine learning", "ai", "data science", "blockchain", "web3",
    "solidity", "smart contracts", "defi", "nft", "ethereum", "solana",
)


def _capitalize_first(keyword: str) -> str:
    # Not str.capitalize(): the remainder keeps its case
    return keyword[:1].upper() + keyword[1:]


def extract_skills(text: str, vocabulary: Sequence[str] = SKILL_KEYWORDS) -> list[str]:
    """
    Find known skill keywords mentioned anywhere in free text.

    Args:
        text: Resume, bio or any other free text (may be empty)
        vocabulary: Lowercase keywords to look for, in reporting order

    Returns:
        Matched keywords with the first character upper-cased, each at most
        once, in vocabulary order
    """
    haystack = (text or "").lower()
    if not haystack:
        return []

    found: list[str] = []
    seen: set[str] = set()
    for keyword in vocabulary:
        key = keyword.lower()
        if key in seen or key not in haystack:
            continue
        seen.add(key)
        found.append(_capitalize_first(keyword))
    return found


def match_score(candidate_skills: Sequence[str], job_skills: Sequence[str]) -> int:
    """
    Percentage of a job's skill list covered by a candidate's skills.

    A candidate skill counts once if it contains, or is contained in, any job
    skill (case-insensitive). The count is divided by the number of JOB
    skills, so the score is not symmetric and is not clamped: duplicate
    candidate skills can push it past 100.

    Returns:
        Integer percentage, rounded half up; 0 if either list is empty
    """
    if not candidate_skills or not job_skills:
        return 0

    candidate = [s.lower() for s in candidate_skills]
    wanted = [s.lower() for s in job_skills]

    matches = sum(
        1
        for skill in candidate
        if any(skill in job_skill or job_skill in skill for job_skill in wanted)
    )

    # round() in Python rounds halves to even; scores round halves up
    return math.floor(matches / len(wanted) * 100 + 0.5)
