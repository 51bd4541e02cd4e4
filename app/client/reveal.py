"""
Client side of the bot: sends a prompt to POST /api/ai and reveals the answer one character at a time.

Flow for one submission:
    IDLE -> DISPATCHING -> AWAITING_RESULT -> REVEALING -> IDLE
                                   \\-> ERRORED -> IDLE

stop() can be called at any point. It flips the submission's CancellationToken and cancels the
request task if one is still running. A stopped submission keeps whatever prefix is on display and
never shows an error. Each submission gets its own token, so a stale flow can never write over
a newer one.
"""
import asyncio
import itertools
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from app.core import config

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."

SleepFn = Callable[[float], Awaitable[Any]]
UpdateFn = Callable[[str], None]


class RevealState(str, Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    AWAITING_RESULT = "awaiting_result"
    REVEALING = "revealing"
    ERRORED = "errored"


class RevealError(Exception):
    pass


class CancellationToken:
    _generations = itertools.count(1)

    def __init__(self) -> None:
        self.generation = next(CancellationToken._generations)
        self.cancelled = False
        self._request: Optional[asyncio.Future] = None

    def attach(self, request: asyncio.Future) -> None:
        self._request = request

    def detach(self) -> None:
        self._request = None

    def cancel(self) -> None:
        # flag first: a reveal loop sees it on its next check even if there is nothing to abort
        self.cancelled = True
        if self._request is not None and not self._request.done():
            self._request.cancel()
        self._request = None

    def __repr__(self) -> str:
        return f"CancellationToken(generation={self.generation}, cancelled={self.cancelled})"


class RevealController:
    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        delay: float = config.REVEAL_DELAY_MS / 1000,
        sleep: SleepFn = asyncio.sleep,
        on_update: Optional[UpdateFn] = None,
    ) -> None:
        self.http = http
        self.delay = delay
        self._sleep = sleep
        self._on_update = on_update

        self.state = RevealState.IDLE
        self.display = ""
        self.is_loading = False
        self.is_typing = False
        self.last_failed = False
        self._token: Optional[CancellationToken] = None

    @property
    def busy(self) -> bool:
        return self.is_loading or self.is_typing

    @property
    def token(self) -> Optional[CancellationToken]:
        return self._token

    def _is_current(self, token: CancellationToken) -> bool:
        return self._token is token

    def _transition(self, token: CancellationToken, state: RevealState) -> None:
        if self._is_current(token):
            self.state = state

    def _show(self, token: CancellationToken, text: str) -> None:
        if not self._is_current(token):
            return
        self.display = text
        if self._on_update is not None:
            self._on_update(text)

    def stop(self) -> None:
        token = self._token
        if token is not None:
            token.cancel()
            self.state = RevealState.IDLE
        self.is_loading = False
        self.is_typing = False

    async def submit(self, prompt: str, model: Optional[str] = None) -> str:
        """Send `prompt` and reveal the answer. Returns what is on display when the flow ends."""
        if not prompt or not prompt.strip() or self.is_loading:
            return self.display

        token = CancellationToken()
        self._token = token
        self.is_loading = True
        self.is_typing = False
        self.last_failed = False
        self.state = RevealState.DISPATCHING
        self._show(token, "")

        try:
            text = await self._fetch(token, prompt, model)
            if text is not None:
                await self._reveal(token, text)
        except asyncio.CancelledError:
            if not token.cancelled:
                raise
            logger.info("Generation stopped by user")
        except Exception:
            if token.cancelled:
                logger.info("Generation stopped by user")
            elif self._is_current(token):
                logger.exception("AI request failed")
                self.last_failed = True
                self.state = RevealState.ERRORED
                self._show(token, ERROR_MESSAGE)
        finally:
            if self._is_current(token):
                self.is_loading = False
                self.is_typing = False
                self._token = None
                self.state = RevealState.IDLE

        return self.display

    async def _fetch(self, token: CancellationToken, prompt: str, model: Optional[str]) -> Optional[str]:
        payload: Dict[str, Any] = {"prompt": prompt}
        if model:
            payload["model"] = model

        request = asyncio.ensure_future(self.http.post("/api/ai", json=payload))
        token.attach(request)
        try:
            res = await request
        finally:
            token.detach()

        # the response may land after stop(); it must not start a reveal
        if token.cancelled:
            return None
        self._transition(token, RevealState.AWAITING_RESULT)

        if res.is_error:
            raise RevealError(f"Failed to fetch response (status {res.status_code})")
        data = res.json()
        result = data.get("result") if isinstance(data, dict) else None
        if result is not None and not isinstance(result, str):
            raise RevealError("Unexpected result type in response")
        if not result or token.cancelled:
            return None
        return result

    async def _reveal(self, token: CancellationToken, text: str) -> None:
        if token.cancelled:
            return
        self._transition(token, RevealState.REVEALING)
        if self._is_current(token):
            self.is_typing = True

        current = ""
        for i, ch in enumerate(text):
            if token.cancelled:
                logger.info("Stop detected, halting reveal at char %d", i)
                break
            current += ch
            self._show(token, current)
            await self._sleep(self.delay)
