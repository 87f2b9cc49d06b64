"""Main entry point for the JobNet API server."""
import argparse
import logging

from config.settings import settings
from src.api.app import create_app
from src.logging_config import setup_logging
from src.persistence.database import init_db

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the JobNet REST API")
    parser.add_argument("--host", default=settings.api_host)
    parser.add_argument("--port", type=int, default=settings.api_port)
    parser.add_argument("--debug", action="store_true", help="Enable the Flask debugger/reloader")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging()

    init_db()
    logger.info("Database: %s...", settings.database_url[:50])

    app = create_app()
    logger.info("Server running on port %d", args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
