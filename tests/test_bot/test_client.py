"""Tests for the Discord client singleton and its event wiring."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from slack_relay.bot.client import build_intents, get_discord_client, reset_client


@pytest.fixture(autouse=True)
def _reset():
    reset_client()
    yield
    reset_client()


def test_intents_include_message_content():
    intents = build_intents()
    assert intents.message_content
    assert intents.guild_messages
    assert intents.guilds
    assert not intents.members


def test_get_discord_client_is_cached():
    assert get_discord_client() is get_discord_client()


def test_reset_client_creates_new_instance():
    first = get_discord_client()
    reset_client()
    assert get_discord_client() is not first


async def test_on_message_passes_bot_identity():
    """on_message forwards the logged-in user's id to the handler."""
    client = get_discord_client()
    message = MagicMock()

    with (
        patch.object(type(client), "user", new=MagicMock(id=999)),
        patch("slack_relay.bot.client.handle_message", new_callable=AsyncMock) as mock_handle,
    ):
        await client.on_message(message)

    mock_handle.assert_awaited_once_with(message, 999)
