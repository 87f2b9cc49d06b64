"""Job routes: listing, posting, applying, recommendations."""
import math

from flask import Blueprint, g, jsonify, request

from src.api.context import get_db, require_auth
from src.api.schemas import JobCreateRequest
from src.api.serializers import job_to_dict, recommendation_to_dict
from src.auth.service import AuthService
from src.jobs.service import JobService

bp = Blueprint("jobs", __name__, url_prefix="/api/jobs")


@bp.route("", methods=["GET"])
def list_jobs():
    limit = max(1, request.args.get("limit", 10, type=int))
    page = max(1, request.args.get("page", 1, type=int))

    jobs, total = JobService(get_db()).list_jobs(
        limit=limit,
        page=page,
        search=request.args.get("search"),
        location=request.args.get("location"),
        min_budget=request.args.get("minBudget", type=float),
        skills=request.args.get("skills"),
    )

    return jsonify({
        "jobs": [job_to_dict(j) for j in jobs],
        "total": total,
        "page": page,
        "totalPages": math.ceil(total / limit),
    })


@bp.route("", methods=["POST"])
@require_auth
def create_job():
    body = JobCreateRequest.model_validate(request.get_json(silent=True) or {})

    job = JobService(get_db()).create_job(posted_by_id=g.user_id, **body.model_dump())

    return jsonify({"message": "Job posted successfully", "job": job_to_dict(job)}), 201


@bp.route("/recommendations", methods=["GET"])
@require_auth
def recommendations():
    session = get_db()
    user = AuthService(session).get_user(g.user_id)
    if user is None:
        return jsonify({"recommendations": []})

    ranked = JobService(session).recommendations_for(user)
    return jsonify({"recommendations": [recommendation_to_dict(r) for r in ranked]})


@bp.route("/<job_id>", methods=["GET"])
def get_job(job_id: str):
    job = JobService(get_db()).require_job(job_id)
    return jsonify({"job": job_to_dict(job)})


@bp.route("/<job_id>/apply", methods=["POST"])
@require_auth
def apply(job_id: str):
    job = JobService(get_db()).apply(job_id, g.user_id)
    return jsonify({"message": "Application submitted", "job": job_to_dict(job)})
