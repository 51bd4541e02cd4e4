import logging
import httpx
from typing import Any, Dict
from app.agents.general import load_system_prompt
from app.core import config
from app.providers.base import ConfigError, EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)

API_KEY_ENV = "SARVAM_API_KEY"


def _build_payload(prompt: str) -> Dict[str, Any]:
    return {
        "model": config.SARVAM_MODEL,
        "messages": [
            {"role": "system", "content": load_system_prompt()},
            {"role": "user", "content": prompt},
        ],
        "temperature": config.SARVAM_TEMPERATURE,
    }


def _error_message(r: httpx.Response) -> str:
    # Sarvam reports failures as {"error": {"message": ...}}; fall back to the raw body
    try:
        data = r.json()
    except ValueError:
        return r.text or r.reason_phrase
    err = data.get("error") if isinstance(data, dict) else None
    if isinstance(err, dict) and err.get("message"):
        return str(err["message"])
    if isinstance(err, str) and err:
        return err
    return r.text or r.reason_phrase


def _extract_content(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


async def generate(prompt: str) -> str:
    api_key = config.get_api_key(API_KEY_ENV)
    if not api_key:
        logger.error("%s is not defined", API_KEY_ENV)
        raise ConfigError(f"API Key configuration error: {API_KEY_ENV} is not configured")

    logger.info("Using model: %s", config.SARVAM_MODEL)
    headers = {
        "api-subscription-key": api_key,
        "Authorization": f"Bearer {api_key}",
    }
    timeout = httpx.Timeout(config.REQUEST_TIMEOUT, connect=10.0)
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            r = await client.post(config.SARVAM_URL, json=_build_payload(prompt), headers=headers)
    except httpx.HTTPError as e:
        raise ProviderError(f"Sarvam HTTP error: {e}") from e

    if r.is_error:
        message = _error_message(r)
        logger.error("Sarvam API error: status=%s message=%s", r.status_code, message)
        raise ProviderError(f"Sarvam API error: {message}", status=r.status_code)

    try:
        data = r.json()
    except ValueError as e:
        raise ProviderError("Unexpected response type from Sarvam.", status=r.status_code) from e

    text = _extract_content(data)
    if not text.strip():
        raise EmptyResponseError("Empty response from Sarvam")

    logger.info("Sarvam response received successfully")
    return text
