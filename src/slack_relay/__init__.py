"""Slack Export Relay: replay Slack export archives into a Discord channel."""

__version__ = "0.1.0"
