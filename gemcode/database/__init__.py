from gemcode.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from gemcode.database.engine import async_session, engine
from gemcode.database.session import session_scope

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "async_session",
    "engine",
    "session_scope",
]
