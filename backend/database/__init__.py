"""
Database module initialization.
Exports database components for use throughout the application.
"""

from database.connection import (
    init_db,
    close_db,
    get_client,
    get_database,
    drop_database,
    check_db_connection,
    probe_mongodb,
    get_db_info,
)
from database.base import BaseDocument, to_store_time, utc_now

__all__ = [
    # Connection management
    "init_db",
    "close_db",
    "get_client",
    "get_database",
    "drop_database",
    # Base classes
    "BaseDocument",
    "utc_now",
    "to_store_time",
    # Utilities
    "check_db_connection",
    "probe_mongodb",
    "get_db_info",
]
