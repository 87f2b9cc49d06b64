#!/usr/bin/env python3
"""Create the JobNet schema, optionally seeding a demo account and jobs.

Usage:
    python scripts/init_db.py [--reset] [--seed]

Environment variables:
    DATABASE_URL: SQLAlchemy URL (defaults to sqlite:///jobnet.db)
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from scripts.bootstrap import drop_db, get_session, init_db, settings
from src.auth.service import AuthService
from src.jobs.service import JobService
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@jobnet.dev"

DEMO_JOBS = [
    {
        "title": "Senior React Developer",
        "description": "Build a decentralized trading UI with React and TypeScript.",
        "budget": 5000,
        "location": "Remote",
        "skills": ["React", "JavaScript", "Node.js", "TypeScript"],
        "job_type": "contract",
        "experience_level": "senior",
    },
    {
        "title": "Smart Contract Engineer",
        "description": "Design and audit Solidity contracts for a DeFi protocol.",
        "budget": 8000,
        "location": "Remote",
        "skills": ["Solidity", "React", "Web3.js", "Smart Contracts"],
        "job_type": "freelance",
        "experience_level": "expert",
    },
    {
        "title": "ML Engineer",
        "description": "Train and ship recommendation models.",
        "budget": 6500,
        "location": "San Francisco, CA",
        "skills": ["Python", "TensorFlow", "Machine Learning", "Data Science"],
        "job_type": "full-time",
        "experience_level": "intermediate",
    },
]


def seed() -> None:
    """Create the demo account and a few demo jobs (skipped if present)."""
    with get_session() as session:
        auth = AuthService(session)
        if auth.get_user_by_email(DEMO_EMAIL) is not None:
            logger.info("Demo data already present, skipping")
            return

        user = auth.register("Demo Recruiter", DEMO_EMAIL, "demo-password")
        jobs = JobService(session)
        for fields in DEMO_JOBS:
            jobs.create_job(posted_by_id=user.id, payment_tx_hash="demo", **fields)
        logger.info("Seeded %d demo jobs", len(DEMO_JOBS))


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--reset", action="store_true", help="Drop all tables first")
    parser.add_argument("--seed", action="store_true", help="Insert demo data")
    args = parser.parse_args()

    setup_logging()
    logger.info("Database: %s...", settings.database_url[:50])

    if args.reset:
        drop_db()
        logger.info("Dropped all tables")

    init_db()

    if args.seed:
        seed()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)
