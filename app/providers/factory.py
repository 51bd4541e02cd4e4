from enum import Enum
from typing import List, Optional
from app.core import config
from app.providers.base import ConfigError, GenerationError, GenerateFn


class UnknownModelError(GenerationError):
    pass


class ModelSelector(str, Enum):
    GEMINI = "gemini"
    SARVAM = "sarvam"


def available_models() -> List[str]:
    return [m.value for m in ModelSelector]


def default_model() -> ModelSelector:
    # a bad DEFAULT_MODEL is a server fault, not the caller's
    name = (config.DEFAULT_MODEL or "").strip().lower()
    try:
        return ModelSelector(name)
    except ValueError:
        raise ConfigError(
            f"DEFAULT_MODEL={config.DEFAULT_MODEL!r} is not one of {available_models()}"
        ) from None


def resolve_model(value: Optional[str]) -> ModelSelector:
    # absent or blank selects the default; anything unrecognized is rejected, never defaulted
    name = (value or "").strip().lower()
    if not name:
        return default_model()
    try:
        return ModelSelector(name)
    except ValueError:
        raise UnknownModelError(f"Unknown model: {value}") from None


def get_generate(model: ModelSelector) -> GenerateFn:
    if model is ModelSelector.GEMINI:
        from app.providers import gemini
        return gemini.generate
    if model is ModelSelector.SARVAM:
        from app.providers import sarvam
        return sarvam.generate
    raise UnknownModelError(f"Unknown model: {model}")
