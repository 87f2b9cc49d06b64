"""Feed routes."""
from flask import Blueprint, g, jsonify, request

from src.api.context import get_db, require_auth
from src.api.schemas import CommentCreateRequest, PostCreateRequest
from src.api.serializers import post_to_dict
from src.feed.service import PostService

bp = Blueprint("posts", __name__, url_prefix="/api/posts")


@bp.route("", methods=["GET"])
def list_posts():
    posts = PostService(get_db()).list_posts(
        limit=request.args.get("limit", 10, type=int),
        page=request.args.get("page", 1, type=int),
    )
    return jsonify({"posts": [post_to_dict(p) for p in posts]})


@bp.route("", methods=["POST"])
@require_auth
def create_post():
    body = PostCreateRequest.model_validate(request.get_json(silent=True) or {})
    post = PostService(get_db()).create_post(g.user_id, body.content)
    return jsonify({"message": "Post created successfully", "post": post_to_dict(post)}), 201


@bp.route("/<post_id>/like", methods=["POST"])
@require_auth
def like_post(post_id: str):
    post = PostService(get_db()).like_post(post_id)
    return jsonify({"message": "Post liked", "post": post_to_dict(post)})


@bp.route("/<post_id>/comments", methods=["POST"])
@require_auth
def comment_on_post(post_id: str):
    body = CommentCreateRequest.model_validate(request.get_json(silent=True) or {})
    post = PostService(get_db()).add_comment(post_id, g.user_id, body.content)
    return jsonify({"message": "Comment added", "post": post_to_dict(post)}), 201


@bp.route("/<post_id>/share", methods=["POST"])
@require_auth
def share_post(post_id: str):
    post = PostService(get_db()).share_post(post_id)
    return jsonify({"message": "Post shared", "post": post_to_dict(post)})
