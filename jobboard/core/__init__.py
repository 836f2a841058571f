"""Core app configuration, database, security and errors."""

from jobboard.core.config import get_settings, settings
from jobboard.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
