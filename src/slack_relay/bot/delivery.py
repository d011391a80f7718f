"""Sequential, best-effort delivery of formatted lines to a Discord channel.

A failed send is logged and recorded but never raised, so one rejected line
cannot stop the rest of the batch. There is no retry.
"""

import logging

import discord
from discord.abc import Messageable

from slack_relay.models.delivery import DeliveryResult

logger = logging.getLogger(__name__)


async def send_line(channel: Messageable, line: str) -> DeliveryResult:
    """Send one line and report the outcome.

    Handles discord.HTTPException (validation errors, rejected rate-limited
    requests, missing permissions) with its status and Discord error code,
    any other DiscordException, and transport errors that escape discord.py.
    """
    try:
        await channel.send(line)
    except discord.HTTPException as exc:
        logger.error(
            "Failed to send line (status=%s code=%s): %s",
            exc.status,
            exc.code,
            exc.text,
        )
        return DeliveryResult(line=line, delivered=False, error=f"{exc.status}: {exc.text}")
    except discord.DiscordException as exc:
        logger.error("Failed to send line: %s", exc, exc_info=True)
        return DeliveryResult(line=line, delivered=False, error=str(exc))
    except Exception as exc:
        # Transport errors (connection resets, timeouts) surface as raw exceptions
        logger.error("Failed to send line: %s", exc, exc_info=True)
        return DeliveryResult(line=line, delivered=False, error=f"{type(exc).__name__}: {exc}")

    return DeliveryResult(line=line, delivered=True)


async def deliver_lines(channel: Messageable, lines: list[str]) -> list[DeliveryResult]:
    """Send lines one at a time, in order, continuing past failures."""
    results: list[DeliveryResult] = []
    for line in lines:
        results.append(await send_line(channel, line))

    failed = [r for r in results if not r.delivered]
    if failed:
        logger.warning(
            "Delivered %d/%d line(s); %d failed",
            len(results) - len(failed),
            len(results),
            len(failed),
        )
    else:
        logger.info("Delivered %d/%d line(s)", len(results), len(results))
    return results
