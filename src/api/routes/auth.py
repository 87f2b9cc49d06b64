"""Account routes: register, login, current user, profile."""
import logging

from flask import Blueprint, current_app, g, jsonify, request

from src.api.context import get_db, require_auth
from src.api.schemas import LoginRequest, ProfileUpdateRequest, RegisterRequest
from src.api.serializers import user_to_dict
from src.auth.service import AuthService
from src.auth.tokens import issue_token

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__, url_prefix="/api")


def _check_rate_limit() -> None:
    limiter = current_app.extensions["jobnet"]["rate_limiter"]
    limiter.check(request.remote_addr or "unknown")


def _token_for(user) -> str:
    return issue_token(user, secret=current_app.config["JWT_SECRET"])


@bp.route("/auth/register", methods=["POST"])
def register():
    _check_rate_limit()
    body = RegisterRequest.model_validate(request.get_json(silent=True) or {})

    user = AuthService(get_db()).register(body.name, body.email, body.password)

    return jsonify({
        "message": "User created successfully",
        "token": _token_for(user),
        "user": user_to_dict(user),
    }), 201


@bp.route("/auth/login", methods=["POST"])
def login():
    _check_rate_limit()
    body = LoginRequest.model_validate(request.get_json(silent=True) or {})

    user = AuthService(get_db()).authenticate(body.email, body.password)

    return jsonify({
        "message": "Login successful",
        "token": _token_for(user),
        "user": user_to_dict(user),
    })


@bp.route("/auth/me", methods=["GET"])
@require_auth
def me():
    user = AuthService(get_db()).require_user(g.user_id)
    return jsonify({"user": user_to_dict(user)})


@bp.route("/auth/profile", methods=["PUT"])
@require_auth
def update_profile():
    body = ProfileUpdateRequest.model_validate(request.get_json(silent=True) or {})

    user = AuthService(get_db()).update_profile(g.user_id, **body.model_dump())

    return jsonify({
        "message": "Profile updated successfully",
        "user": user_to_dict(user),
    })


@bp.route("/users/<user_id>", methods=["GET"])
def public_profile(user_id: str):
    user = AuthService(get_db()).view_profile(user_id)
    return jsonify({"user": user_to_dict(user, public=True)})
