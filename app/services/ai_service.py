import logging
from typing import Optional
from app.providers.factory import ModelSelector, get_generate, resolve_model

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    pass


async def generate_response(prompt: Optional[str], model: Optional[str] = None) -> tuple[str, ModelSelector]:
    # validate and resolve before any adapter is touched
    if not prompt or not prompt.strip():
        raise ValidationError("Prompt is required")

    selector = resolve_model(model)
    logger.info("dispatching prompt to model=%s", selector.value)

    generate = get_generate(selector)
    text = await generate(prompt)
    return text, selector
