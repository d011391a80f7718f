"""Discord client singleton.

Creates a cached discord.Client with the intents needed to read message
content and attachments, and wires its events to the trigger handler.
Follows the same lazy-init pattern as config.get_settings().
"""

import logging

import discord

from slack_relay.bot.handlers import handle_message

logger = logging.getLogger(__name__)

_client: discord.Client | None = None


def build_intents() -> discord.Intents:
    """Intents for guild text channels with message content access."""
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


def get_discord_client() -> discord.Client:
    """Return a cached Discord client with event handlers registered.

    Creates the client on first call. Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        _client = discord.Client(intents=build_intents())
        _register_events(_client)
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None


def _register_events(client: discord.Client) -> None:
    @client.event
    async def on_ready() -> None:
        logger.info("Logged in to Discord as %s", client.user)

    @client.event
    async def on_message(message: discord.Message) -> None:
        if client.user is None:
            return
        await handle_message(message, client.user.id)
