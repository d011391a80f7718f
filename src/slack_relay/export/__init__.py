"""Slack export transformation: load, resolve users, normalize, format."""

from slack_relay.export.errors import (
    AttachmentLoadError,
    ExportError,
    MissingUsersFileError,
)
from slack_relay.export.loader import fetch_documents
from slack_relay.export.pipeline import build_lines

__all__ = [
    "AttachmentLoadError",
    "ExportError",
    "MissingUsersFileError",
    "build_lines",
    "fetch_documents",
]
