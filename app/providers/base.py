# declares the provider contract (generate(prompt) -> text) and the errors every adapter raises
# the router only knows about GenerationError, so adding a provider never touches endpoint logic

from typing import Awaitable, Callable, Optional


class GenerationError(Exception):
    pass


class ConfigError(GenerationError):
    """The API key a provider needs is not set."""


class EmptyResponseError(GenerationError):
    """The provider answered but gave no usable text."""


class ProviderError(GenerationError):
    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        self.message = message
        super().__init__(f"{message} (status {status})" if status is not None else message)


GenerateFn = Callable[[str], Awaitable[str]]

