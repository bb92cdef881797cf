# imagegen/services/fetch.py
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlsplit

import requests
from pydantic import BaseModel, Field

from imagegen.core.errors import FetchFailed, InvalidRequest

logger = logging.getLogger(__name__)

ATTACHMENT_FILENAME = "ai-generated-image.png"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


class FetchedImage(BaseModel):
    """Image bytes relayed back to the caller."""

    content: bytes = Field(..., description="Full image body")
    content_type: str = Field(..., description="Media type declared by the remote host")


def content_disposition() -> str:
    return f'attachment; filename="{ATTACHMENT_FILENAME}"'


def redact_url(url: str) -> str:
    """Drop query and fragment; hosted image URLs carry signed tokens there."""
    parts = urlsplit(url)
    if not parts.netloc:
        return "<invalid url>"
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


def fetch_image(image_url: Optional[str], timeout: float = 30.0) -> FetchedImage:
    """Fetch a hosted image fully into memory."""
    if not image_url or not image_url.strip():
        raise InvalidRequest("Image URL is required")

    try:
        response = requests.get(image_url, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("Image fetch failed for %s: %s", redact_url(image_url), type(e).__name__)
        raise FetchFailed(f"Failed to fetch image: {e}") from e

    if not response.ok:
        logger.warning("Image fetch for %s returned %s", redact_url(image_url), response.status_code)
        raise FetchFailed(f"Failed to fetch image: {response.reason}")

    content_type = response.headers.get("Content-Type") or DEFAULT_CONTENT_TYPE
    return FetchedImage(content=response.content, content_type=content_type)
