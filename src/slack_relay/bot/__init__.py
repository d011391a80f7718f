"""Discord ingress: client lifecycle, trigger handling and line delivery."""

from slack_relay.bot.client import get_discord_client, reset_client
from slack_relay.bot.delivery import deliver_lines
from slack_relay.bot.handlers import handle_message, is_trigger

__all__ = [
    "deliver_lines",
    "get_discord_client",
    "handle_message",
    "is_trigger",
    "reset_client",
]
