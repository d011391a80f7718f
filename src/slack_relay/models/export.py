"""Slack export models: attachments, documents, users and message records.

The ``Slack*`` models are tolerant decoders for semi-structured export JSON.
Every field is optional and unknown fields are ignored, so only a wrong JSON
type on a field we actually read can cause a record to be rejected.
"""

from pydantic import BaseModel, ConfigDict, Field


class AttachmentRef(BaseModel):
    """A remote file attached to the trigger message."""

    name: str  # File name as uploaded, e.g. "users.json"
    url: str


class NamedDocument(BaseModel):
    """A parsed JSON attachment. Content is always a JSON array."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: list


class SlackProfile(BaseModel):
    """The ``profile`` sub-object of a users.json entry."""

    display_name_normalized: str | None = None
    display_name: str | None = None
    real_name_normalized: str | None = None
    real_name: str | None = None


class SlackUser(BaseModel):
    """One entry of users.json."""

    id: str | None = None
    name: str | None = None
    real_name: str | None = None
    real_name_normalized: str | None = None
    profile: SlackProfile = Field(default_factory=SlackProfile)

    def display_name(self) -> str | None:
        """Return the first non-empty name in fallback order, or None."""
        candidates = (
            self.profile.display_name_normalized,
            self.profile.display_name,
            self.profile.real_name_normalized,
            self.real_name_normalized,
            self.profile.real_name,
            self.real_name,
            self.name,
        )
        return next((c for c in candidates if c), None)


class User(BaseModel):
    """A directory entry: Slack user ID and the name shown in relayed messages."""

    id: str
    display_name: str | None = None


class SlackRecord(BaseModel):
    """One per-message object from a channel export file."""

    type: str | None = None
    subtype: str | None = None
    text: str | None = None
    user: str | None = None
    ts: str | None = None  # Slack message ts, e.g. "1700000000.123456"
