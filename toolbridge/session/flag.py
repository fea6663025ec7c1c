"""Two-state session gate: IDLE until a trigger word, ACTIVE afterwards.

The phase lives in an external store under a fixed key. ``activate`` and
``deactivate`` are the only transitions; anything other than a stored
``True`` reads as IDLE.
"""

import logging
from enum import Enum

from toolbridge.session.store import SessionStore

logger = logging.getLogger(__name__)

SESSION_KEY = "in_chat"


class SessionPhase(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


class SessionFlag:
    """Whether follow-up messages without the trigger word are processed."""

    def __init__(self, store: SessionStore, key: str = SESSION_KEY):
        self.store = store
        self.key = key

    @property
    def phase(self) -> SessionPhase:
        if self.store.get(self.key) is True:
            return SessionPhase.ACTIVE
        return SessionPhase.IDLE

    @property
    def is_active(self) -> bool:
        return self.phase == SessionPhase.ACTIVE

    def activate(self) -> None:
        """IDLE -> ACTIVE, on trigger-word receipt."""
        self.store.set(self.key, True)
        logger.debug("Session flag set to ACTIVE")

    def deactivate(self) -> None:
        """ACTIVE -> IDLE, on tool dispatch or empty final reply."""
        self.store.delete(self.key)
        logger.debug("Session flag cleared")
