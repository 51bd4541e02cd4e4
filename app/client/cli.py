"""Terminal front end: type a prompt, watch the answer appear, Ctrl-C to stop it."""

import asyncio
import logging
import signal
import sys

import click
import httpx

from app.client.reveal import RevealController
from app.core import config
from app.providers.factory import available_models

logger = logging.getLogger(__name__)


class TerminalWriter:
    """Prints only what was added since the last update; starts a new line if the text was replaced."""

    def __init__(self, stream=None) -> None:
        self.stream = stream or sys.stdout
        self._shown = ""

    def __call__(self, text: str) -> None:
        if text.startswith(self._shown):
            self.stream.write(text[len(self._shown):])
        else:
            if self._shown:
                self.stream.write("\n")
            self.stream.write(text)
        self.stream.flush()
        self._shown = text


async def run_prompt(
    prompt: str,
    *,
    model: str | None,
    url: str,
    delay: float,
    writer: TerminalWriter,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    timeout = httpx.Timeout(config.REQUEST_TIMEOUT + 10.0, connect=10.0)
    async with httpx.AsyncClient(base_url=url, timeout=timeout, transport=transport) as http:
        controller = RevealController(http, delay=delay, on_update=writer)

        loop = asyncio.get_running_loop()
        try:
            loop.add_signal_handler(signal.SIGINT, controller.stop)
        except (NotImplementedError, RuntimeError):
            logger.debug("signal handlers unavailable; Ctrl-C will abort the process")

        try:
            await controller.submit(prompt, model)
        finally:
            try:
                loop.remove_signal_handler(signal.SIGINT)
            except (NotImplementedError, RuntimeError):
                pass

    writer.stream.write("\n")
    return 1 if controller.last_failed else 0


@click.command()
@click.argument("prompt", nargs=-1, required=True)
@click.option("--model", type=click.Choice(available_models()), default=None, help="Provider to ask.")
@click.option("--url", default=config.API_BASE_URL, show_default=True, help="Base URL of the AI Bot server.")
@click.option("--delay-ms", default=config.REVEAL_DELAY_MS, show_default=True, type=click.IntRange(min=0),
              help="Delay between revealed characters.")
def main(prompt: tuple[str, ...], model: str | None, url: str, delay_ms: int) -> None:
    """Ask PROMPT and reveal the answer character by character."""
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    text = " ".join(prompt)
    if not text.strip():
        raise click.UsageError("Prompt is required")
    code = asyncio.run(run_prompt(text, model=model, url=url, delay=delay_ms / 1000, writer=TerminalWriter()))
    sys.exit(code)


if __name__ == "__main__":
    main()
