"""Toolbridge API server: Slack Events API endpoint and health check."""

import logging
from typing import Any

from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException, Request

from toolbridge.config import get_settings
from toolbridge.deps import get_bridge
from toolbridge.middleware import global_exception_handler, verify_slack_signature
from toolbridge.version import __version__

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Toolbridge API",
    description="Slack bridge to a tool-calling language model",
    version=__version__,
)
app.add_exception_handler(Exception, global_exception_handler)


def extract_message_text(payload: dict[str, Any], channel: str) -> str | None:
    """Text of a plain user message in ``channel``, else None.

    Edits, joins, and the bot's own posts carry a subtype or bot_id and
    are skipped so the bridge never answers itself.
    """
    event = payload.get("event") or {}
    if event.get("type") != "message":
        return None
    if event.get("subtype") or event.get("bot_id"):
        return None
    if event.get("channel") != channel:
        return None
    text = event.get("text")
    return text if isinstance(text, str) else None


@app.get("/health")
async def health():
    """Liveness check."""
    return {"status": "ok", "version": __version__}


@app.post("/slack/events")
async def slack_events(
    request: Request,
    background_tasks: BackgroundTasks,
    _verified: bool = Depends(verify_slack_signature),
):
    """Receive Slack events; replies are posted asynchronously."""
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON body")

    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid event payload")

    event_type = payload.get("type")
    if event_type == "url_verification":
        return {"challenge": payload.get("challenge", "")}

    if event_type != "event_callback":
        logger.debug(f"Ignoring Slack payload of type {event_type!r}")
        return {"ok": True}

    text = extract_message_text(payload, get_settings().slack_channel)
    if text is not None:
        background_tasks.add_task(get_bridge().handle_message, text)

    return {"ok": True}
