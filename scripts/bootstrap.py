"""Path setup shared by the scripts in this directory.

Usage:
    from scripts.bootstrap import settings, get_session, init_db
"""
import sys
from pathlib import Path

# Scripts run as files, not as installed modules
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from config.settings import settings
from src.persistence.database import drop_db, get_session, init_db

__all__ = ["settings", "get_session", "init_db", "drop_db"]
