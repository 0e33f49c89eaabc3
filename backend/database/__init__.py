"""
Database module initialization.
Exports database components for use throughout the application.
"""

from database.connection import (
    init_db,
    close_db,
    check_db_connection,
    get_db_info,
)
from database.base import BaseDocument, TimestampMixin

__all__ = [
    # Connection management
    "init_db",
    "close_db",
    # Base classes
    "BaseDocument",
    "TimestampMixin",
    # Utilities
    "check_db_connection",
    "get_db_info",
]
