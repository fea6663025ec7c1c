"""Session flag and the key-value stores backing it."""

from toolbridge.session.flag import SESSION_KEY, SessionFlag, SessionPhase
from toolbridge.session.store import (
    JsonFileSessionStore,
    MemorySessionStore,
    SessionStore,
    create_session_store,
)

__all__ = [
    "SESSION_KEY",
    "JsonFileSessionStore",
    "MemorySessionStore",
    "SessionFlag",
    "SessionPhase",
    "SessionStore",
    "create_session_store",
]
