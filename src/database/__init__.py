from src.database.base import Base, TimestampMixin
from src.database.engine import async_session, engine, init_schema
from src.database.session import get_db

__all__ = [
    "Base",
    "TimestampMixin",
    "async_session",
    "engine",
    "get_db",
    "init_schema",
]
