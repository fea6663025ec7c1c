"""Webpage text extraction."""

import asyncio
import logging

import requests
from bs4 import BeautifulSoup

from toolbridge.config import get_settings

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "failed to get webpage"

# User agent to avoid blocks
USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def extract_text(html: str) -> str:
    """Readable text of an HTML document, one block per line."""
    soup = BeautifulSoup(html, "lxml")

    for element in soup(["script", "style", "nav", "footer", "header", "aside", "noscript"]):
        element.decompose()

    text = soup.get_text(separator="\n", strip=True)
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    return "\n".join(lines)


def get_page_text(url: str) -> str:
    """Fetch ``url`` and extract its text.

    Raises:
        requests.exceptions.RequestException: on transport or HTTP errors.
    """
    logger.debug(f"Fetching webpage: {url}")
    headers = {"User-Agent": USER_AGENT}
    response = requests.get(url, headers=headers, timeout=get_settings().request_timeout)
    response.raise_for_status()
    return extract_text(response.text)


async def scrape(url: str) -> str:
    """Text content of ``url``, or the fixed failure message."""
    try:
        return await asyncio.to_thread(get_page_text, url)
    except Exception as e:
        logger.warning(f"Webpage fetch failed for {url}: {e}")
        return FAILURE_MESSAGE
