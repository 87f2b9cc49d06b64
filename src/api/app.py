"""Flask application factory for the JobNet REST API."""
import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker
from werkzeug.exceptions import HTTPException

from config.settings import settings
from src.api.context import close_db
from src.api.routes import BLUEPRINTS
from src.auth.exceptions import RateLimitExceededError
from src.auth.rate_limit import RateLimiter
from src.errors import JobNetError

logger = logging.getLogger(__name__)


def _validation_message(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first['msg']}" if field else first["msg"]


def register_error_handlers(app: Flask) -> None:
    """Translate exceptions into ``{"message": ...}`` JSON responses."""

    @app.errorhandler(JobNetError)
    def handle_domain_error(error: JobNetError):
        response = jsonify({"message": str(error)})
        response.status_code = error.status_code
        if isinstance(error, RateLimitExceededError):
            response.headers["Retry-After"] = str(error.retry_after)
        return response

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        return jsonify({"message": _validation_message(error)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        logger.exception("Unhandled error: %s", error)
        return jsonify({"message": "Server error"}), 500


def create_app(
    session_factory: Optional[sessionmaker] = None,
    rate_limiter: Optional[RateLimiter] = None,
    jwt_secret: Optional[str] = None,
) -> Flask:
    """
    Build the API application.

    Args:
        session_factory: Session factory for request sessions (defaults to
            the engine configured by settings.database_url)
        rate_limiter: Limiter for login/register (defaults to settings values)
        jwt_secret: Token signing secret (defaults to settings.jwt_secret)

    Returns:
        Configured Flask app
    """
    if session_factory is None:
        from src.persistence.database import SessionLocal
        session_factory = SessionLocal

    app = Flask(__name__)
    app.config["JWT_SECRET"] = jwt_secret or settings.jwt_secret
    app.json.sort_keys = False

    app.extensions["jobnet"] = {
        "session_factory": session_factory,
        "rate_limiter": rate_limiter or RateLimiter(
            max_requests=settings.auth_rate_limit,
            window_seconds=settings.auth_rate_window_seconds,
        ),
    }

    CORS(app, origins=settings.cors_origin_list)

    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)

    app.teardown_appcontext(close_db)
    register_error_handlers(app)

    return app
