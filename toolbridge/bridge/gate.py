"""Decide whether an inbound message reaches the model."""

import logging

from toolbridge.session.flag import SessionFlag

logger = logging.getLogger(__name__)


def apply_gate(text: str, trigger_word: str, flag: SessionFlag) -> str | None:
    """Return the user utterance to process, or None to ignore the message.

    A message starting with the trigger word always passes, with the
    trigger stripped, and (re)activates the session. Anything else passes
    only while the session is ACTIVE.
    """
    if trigger_word and text.startswith(trigger_word):
        flag.activate()
        utterance = text[len(trigger_word):].lstrip()
        logger.debug("Trigger word received, session active")
        return utterance

    if not flag.is_active:
        logger.debug("Session idle, ignoring message")
        return None

    return text
