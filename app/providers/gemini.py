import logging
from typing import Any, Dict
from google import genai
from google.genai import errors
from app.core import config
from app.providers.base import ConfigError, EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)

API_KEY_ENV = "GEMINI_API_KEY"

# one SDK client (and its connection pool) per key, reused across requests
_CLIENT_CACHE: Dict[str, Any] = {}


def _get_client(api_key: str) -> Any:
    if api_key not in _CLIENT_CACHE:
        _CLIENT_CACHE[api_key] = genai.Client(api_key=api_key)
    return _CLIENT_CACHE[api_key]


async def generate(prompt: str) -> str:
    api_key = config.get_api_key(API_KEY_ENV)
    if not api_key:
        logger.error("%s is not defined", API_KEY_ENV)
        raise ConfigError(f"API Key configuration error: {API_KEY_ENV} is not configured")

    logger.info("Using model: %s", config.GEMINI_MODEL)
    client = _get_client(api_key)
    try:
        response = await client.aio.models.generate_content(
            model=config.GEMINI_MODEL,
            contents=prompt,
        )
    except errors.APIError as e:
        logger.error("Gemini API error: status=%s message=%s", e.code, e.message)
        raise ProviderError(f"Gemini API error: {e.message or e}", status=e.code) from e

    text = response.text
    if not text:
        raise EmptyResponseError("Empty response from Gemini")

    logger.info("Gemini response received successfully")
    return text
