"""Model to JSON conversion in the shape the browser client expects."""
from datetime import datetime
from typing import Optional

from src.matching.recommender import Recommendation
from src.persistence.models import Comment, Job, Post, User


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _ref(user: Optional[User]) -> Optional[dict]:
    """Populated user reference: id and name only."""
    if user is None:
        return None
    return {"_id": user.id, "id": user.id, "name": user.name}


def user_to_dict(user: User, public: bool = False) -> dict:
    """Account view; ``public`` drops email and wallet and adds view count."""
    data = {
        "id": user.id,
        "name": user.name,
        "bio": user.bio,
        "location": user.location,
        "linkedinUrl": user.linkedin_url,
        "skills": list(user.skills or []),
    }
    if public:
        data["profileViews"] = user.profile_views or 0
        data["createdAt"] = _iso(user.created_at)
    else:
        data["email"] = user.email
        data["walletAddress"] = user.wallet_address
    return data


def job_to_dict(job: Job) -> dict:
    return {
        "_id": job.id,
        "id": job.id,
        "title": job.title,
        "description": job.description,
        "budget": job.budget,
        "location": job.location,
        "skills": list(job.skills or []),
        "jobType": job.job_type,
        "experienceLevel": job.experience_level,
        "postedBy": _ref(job.posted_by),
        "applicants": len(job.applicants),
        "status": job.status,
        "paymentTxHash": job.payment_tx_hash,
        "createdAt": _iso(job.created_at),
    }


def recommendation_to_dict(rec: Recommendation) -> dict:
    data = job_to_dict(rec.job)
    data["matchScore"] = rec.score
    data["reason"] = rec.reason
    return data


def comment_to_dict(comment: Comment) -> dict:
    return {
        "_id": comment.id,
        "author": _ref(comment.author),
        "content": comment.content,
        "createdAt": _iso(comment.created_at),
    }


def post_to_dict(post: Post) -> dict:
    return {
        "_id": post.id,
        "id": post.id,
        "content": post.content,
        "author": _ref(post.author),
        "likes": post.likes or 0,
        "shares": post.shares or 0,
        "comments": [comment_to_dict(c) for c in post.comments],
        "createdAt": _iso(post.created_at),
    }
