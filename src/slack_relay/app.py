"""FastAPI application with lifespan, Discord client startup and ping endpoint."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from slack_relay.bot.client import get_discord_client
from slack_relay.config import get_settings
from slack_relay.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging, load config and run the Discord client alongside the web server."""
    settings = get_settings()
    configure_logging(settings.log_level)

    bot_task: asyncio.Task | None = None
    if settings.discord_token:
        client = get_discord_client()
        bot_task = asyncio.create_task(client.start(settings.discord_token))
        bot_task.add_done_callback(_report_bot_exit)
    else:
        logger.warning("DISCORD_TOKEN is not configured; Discord client not started")

    yield

    if bot_task is not None:
        client = get_discord_client()
        if not client.is_closed():
            await client.close()
        if not bot_task.done():
            bot_task.cancel()


def _report_bot_exit(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Discord client stopped", exc_info=exc)


app = FastAPI(
    title="Slack Export Relay",
    lifespan=lifespan,
)


@app.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    """Liveness check for the hosting platform."""
    return "pong"
