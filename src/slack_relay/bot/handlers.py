"""Trigger detection and request orchestration for incoming Discord messages."""

import logging
from zoneinfo import ZoneInfo

import discord

from slack_relay.bot.delivery import deliver_lines
from slack_relay.config import get_settings
from slack_relay.export import (
    AttachmentLoadError,
    ExportError,
    build_lines,
    fetch_documents,
)
from slack_relay.export.users import USERS_FILE_NAME
from slack_relay.models.delivery import DeliveryResult
from slack_relay.models.export import AttachmentRef

logger = logging.getLogger(__name__)

MISSING_ATTACHMENTS_REPLY = (
    "Please attach the message files exported from Slack together with `users.json`."
)
MISSING_USERS_FILE_REPLY = "Please attach a file named `users.json`."
MISSING_EXPORT_FILES_REPLY = "Please attach the message files exported from Slack."
LOAD_FAILURE_REPLY = (
    "Could not read the attached files. Make sure they are Slack export JSON files."
)


def mentions_user(message: discord.Message, user_id: int) -> bool:
    """Return True if ``user_id`` is among the users mentioned in the message."""
    return any(user.id == user_id for user in message.mentions)


def is_trigger(message: discord.Message, bot_user_id: int) -> bool:
    """A trigger is a message from a human that mentions the bot."""
    if message.author.bot:
        return False
    return mentions_user(message, bot_user_id)


def attachment_refs(message: discord.Message) -> list[AttachmentRef]:
    """Extract name and download URL from each message attachment."""
    return [AttachmentRef(name=a.filename, url=a.url) for a in message.attachments]


async def handle_message(
    message: discord.Message, bot_user_id: int
) -> list[DeliveryResult] | None:
    """Handle one incoming message.

    Checks are applied in order, each ending the request with a guidance reply:
    1. Not a trigger -> ignore silently
    2. No attachments
    3. No users.json among the attachment names
    4. Only users.json attached
    5. An attachment fails to download or parse, or cannot be converted

    Otherwise the export is converted and every line is sent to the
    message's channel. Returns the per-line delivery results, or None if
    the pipeline did not run.
    """
    if not is_trigger(message, bot_user_id):
        return None

    channel = message.channel
    refs = attachment_refs(message)

    if not refs:
        await channel.send(MISSING_ATTACHMENTS_REPLY)
        return None

    names = [r.name for r in refs]
    if USERS_FILE_NAME not in names:
        await channel.send(MISSING_USERS_FILE_REPLY)
        return None

    if all(name == USERS_FILE_NAME for name in names):
        await channel.send(MISSING_EXPORT_FILES_REPLY)
        return None

    settings = get_settings()
    logger.info(
        "Processing %d attachment(s) from message %s in channel %s",
        len(refs),
        message.id,
        channel.id,
    )

    try:
        documents = await fetch_documents(
            refs, timeout_seconds=settings.fetch_timeout_seconds
        )
    except AttachmentLoadError as exc:
        logger.error("Attachment loading failed for message %s: %s", message.id, exc, exc_info=True)
        await channel.send(LOAD_FAILURE_REPLY)
        return None

    tz = ZoneInfo(settings.display_timezone) if settings.display_timezone else None
    try:
        lines = build_lines(documents, tz=tz, timestamp_format=settings.timestamp_format)
    except (ExportError, ValueError) as exc:
        logger.error("Export conversion failed for message %s: %s", message.id, exc, exc_info=True)
        await channel.send(LOAD_FAILURE_REPLY)
        return None

    return await deliver_lines(channel, lines)
