"""Data models for the Slack export relay pipeline."""

from slack_relay.models.delivery import DeliveryResult
from slack_relay.models.export import (
    AttachmentRef,
    NamedDocument,
    SlackProfile,
    SlackRecord,
    SlackUser,
    User,
)

__all__ = [
    "AttachmentRef",
    "DeliveryResult",
    "NamedDocument",
    "SlackProfile",
    "SlackRecord",
    "SlackUser",
    "User",
]
