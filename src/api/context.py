"""Per-request database session and bearer-token authentication."""
from functools import wraps

from flask import current_app, g, request
from sqlalchemy.orm import Session

from src.auth.exceptions import MissingTokenError
from src.auth.tokens import decode_token


def get_db() -> Session:
    """Session for the current request, opened on first use."""
    if "db" not in g:
        g.db = current_app.extensions["jobnet"]["session_factory"]()
    return g.db


def close_db(exc: BaseException | None = None) -> None:
    """Teardown hook: discard uncommitted work and release the session."""
    session = g.pop("db", None)
    if session is None:
        return
    if exc is not None:
        session.rollback()
    session.close()


def require_auth(f):
    """Route decorator: verify the bearer token and set ``g.user_id``."""
    @wraps(f)
    def decorated(*args, **kwargs):
        header = request.headers.get("Authorization", "")
        parts = header.split(" ")
        token = parts[1] if len(parts) > 1 else ""
        if not token:
            raise MissingTokenError()

        payload = decode_token(token, current_app.config["JWT_SECRET"])
        g.user_id = payload["userId"]
        return f(*args, **kwargs)
    return decorated
