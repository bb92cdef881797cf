# imagegen/services/generation.py
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import openai

from imagegen.core.errors import (
    AuthError,
    GenerationFailed,
    ImageGeneratorError,
    InvalidRequest,
    RateLimited,
)

logger = logging.getLogger(__name__)

VARIANT_COUNT = 4


def validate_prompt(prompt: Optional[str]) -> str:
    if not prompt or not prompt.strip():
        raise InvalidRequest("Prompt is required")
    return prompt


def build_prompt_variants(prompt: str, count: int = VARIANT_COUNT) -> List[str]:
    """The prompt itself followed by ``count - 1`` numbered variations."""
    return [prompt] + [f"{prompt} with slight variation {i}" for i in range(1, count)]


def _first_url(response: Any) -> str:
    data = getattr(response, "data", None) or []
    url = getattr(data[0], "url", None) if data else None
    if not url:
        raise GenerationFailed("Provider response did not include an image URL")
    return url


def classify_failure(failures: Sequence[Exception]) -> ImageGeneratorError:
    """Collapse the per-variant failures of an empty batch into one outcome."""
    for exc in failures:
        if isinstance(exc, openai.AuthenticationError):
            return AuthError(f"Provider authentication failed: {exc}")
    for exc in failures:
        if isinstance(exc, openai.RateLimitError):
            return RateLimited(f"Provider rate limit reached: {exc}")
    if failures:
        return GenerationFailed(f"Failed to generate images: {failures[-1]}")
    return GenerationFailed("Failed to generate images")


async def generate_images(
    prompt: str,
    client: Any,
    *,
    model: str = "dall-e-3",
    size: str = "1024x1024",
    count: int = VARIANT_COUNT,
) -> List[str]:
    """Request one image per prompt variant, one call at a time.

    A failing variant is logged and skipped; the URLs that did come back are
    returned in the order their variants were issued. Raises the classified
    failure only when no variant produced an image.
    """
    images: List[str] = []
    failures: List[Exception] = []

    for index, variant in enumerate(build_prompt_variants(prompt, count)):
        try:
            # dall-e-3 only supports n=1
            response = await client.images.generate(
                model=model,
                prompt=variant,
                n=1,
                size=size,
            )
            images.append(_first_url(response))
        except Exception as e:
            logger.warning("Variant %d of %d failed: %s", index + 1, count, e)
            failures.append(e)

    if not images:
        error = classify_failure(failures)
        logger.error("All %d variants failed: %s", count, error.message)
        raise error

    if failures:
        logger.info("Generated %d of %d images", len(images), count)
    return images
