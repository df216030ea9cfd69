"""Database layer for balancekeeper application."""

from balancekeeper.database.base import Database
from balancekeeper.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
