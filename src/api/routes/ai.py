"""Skill extraction and health routes."""
from datetime import datetime, timezone

from flask import Blueprint, jsonify, request

from src.api.context import require_auth
from src.errors import MissingFieldError
from src.matching.skills import extract_skills

bp = Blueprint("ai", __name__, url_prefix="/api")


@bp.route("/ai/extract-skills", methods=["POST"])
@require_auth
def extract():
    body = request.get_json(silent=True)
    text = body.get("text") if isinstance(body, dict) else None
    if not text or not isinstance(text, str):
        raise MissingFieldError("text", "Text is required")

    skills = extract_skills(text)
    return jsonify({
        "skills": skills,
        "message": f"Extracted {len(skills)} skills",
    })


@bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()})
