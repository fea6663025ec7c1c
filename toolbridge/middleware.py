"""FastAPI middleware components.

This module contains:
- Slack request signature verification
- Exception handlers
"""

import hashlib
import hmac
import logging
import time

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from toolbridge.config import get_settings

logger = logging.getLogger(__name__)

# Slack rejects replays older than five minutes; so do we
MAX_REQUEST_AGE = 60 * 5


def compute_slack_signature(secret: str, timestamp: str, body: bytes) -> str:
    """Slack v0 signature for a request body."""
    basestring = f"v0:{timestamp}:".encode() + body
    digest = hmac.new(secret.encode(), basestring, hashlib.sha256).hexdigest()
    return f"v0={digest}"


async def verify_slack_signature(request: Request) -> bool:
    """Verify the Slack signature if a signing secret is configured."""
    secret = get_settings().slack_signing_secret
    if secret is None:
        return True

    timestamp = request.headers.get("X-Slack-Request-Timestamp")
    signature = request.headers.get("X-Slack-Signature")
    if not timestamp or not signature:
        raise HTTPException(status_code=401, detail="Missing Slack signature headers")

    try:
        age = abs(time.time() - int(timestamp))
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid Slack timestamp")
    if age > MAX_REQUEST_AGE:
        raise HTTPException(status_code=401, detail="Stale Slack request")

    body = await request.body()
    expected = compute_slack_signature(secret, timestamp, body)

    # Use constant-time comparison to prevent timing attacks
    if not hmac.compare_digest(expected, signature):
        raise HTTPException(status_code=403, detail="Invalid Slack signature")

    return True


async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions gracefully."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred",
        },
    )
