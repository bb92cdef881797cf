# AsyncOpenAI init (cached per credential)
from functools import lru_cache

from dotenv import load_dotenv
from openai import AsyncOpenAI

from imagegen.core.config import AppSettings
from imagegen.core.errors import ConfigurationError

# Load .env file so SDK-level variables (OPENAI_BASE_URL, OPENAI_ORG_ID) apply too
load_dotenv()


@lru_cache(maxsize=4)
def _build_client(api_key: str, timeout: float) -> AsyncOpenAI:
    # Provider errors are surfaced as-is, never retried
    return AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)


def get_image_client(settings: AppSettings) -> AsyncOpenAI:
    """Return the provider client, or fail before any call when no key is set."""
    api_key = (settings.openai_api_key or "").strip()
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY is not configured")
    return _build_client(api_key, settings.request_timeout)
