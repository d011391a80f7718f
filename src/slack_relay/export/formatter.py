"""Render Slack records as Discord message lines.

Discord rejects messages over 2000 characters. Records longer than
MAX_MESSAGE_LENGTH are split into fixed-size chunks, leaving room for the
author prefix and timestamp suffix.
"""

from datetime import datetime, tzinfo

from slack_relay.models.export import SlackRecord, User

MAX_MESSAGE_LENGTH = 1900

UNKNOWN_AUTHOR = "unknown"

DEFAULT_TIMESTAMP_FORMAT = "%c"


def unwrap_link(text: str) -> str:
    """Strip Slack link markup from text that starts with ``<http``.

    ``<https://example.com|label>`` becomes ``https://example.com``. Only a
    leading link is handled, and everything after the first ``|`` is dropped.
    Other text is returned unchanged.
    """
    if text.startswith("<http"):
        return text.split("|", 1)[0][1:]
    return text


def format_timestamp(
    ts: str, tz: tzinfo | None = None, fmt: str = DEFAULT_TIMESTAMP_FORMAT
) -> str:
    """Render a Slack ``ts`` (seconds since epoch, as a string) to whole seconds.

    With ``tz=None`` the host's local timezone is used. ``%c`` renders in the
    current locale's date and time representation.
    """
    seconds = int(float(ts))
    return datetime.fromtimestamp(seconds, tz=tz).strftime(fmt)


def resolve_author(directory: dict[str, User], user_id: str | None) -> str:
    """Return the display name for ``user_id``, or UNKNOWN_AUTHOR."""
    user = directory.get(user_id) if user_id else None
    if user is None or not user.display_name:
        return UNKNOWN_AUTHOR
    return user.display_name


def split_text(text: str, size: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Split text into consecutive chunks of ``size`` characters (last may be shorter)."""
    return [text[i : i + size] for i in range(0, len(text), size)]


def format_record(
    record: SlackRecord,
    directory: dict[str, User],
    tz: tzinfo | None = None,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> list[str]:
    """Render one normalized record as one or more output lines.

    The length check uses the raw text, before link unwrapping. A record that
    fits yields ``"{author}: {text} ({timestamp})"``. Longer records yield the
    author on the first chunk and the timestamp on the last.
    """
    text = record.text or ""
    author = resolve_author(directory, record.user)
    timestamp = format_timestamp(record.ts, tz=tz, fmt=timestamp_format)

    if len(text) <= MAX_MESSAGE_LENGTH:
        return [f"{author}: {unwrap_link(text)} ({timestamp})"]

    chunks = split_text(text)
    last = len(chunks) - 1
    lines: list[str] = []
    for i, chunk in enumerate(chunks):
        body = unwrap_link(chunk)
        if i == 0:
            lines.append(f"{author}: {body}")
        elif i == last:
            lines.append(f"{body} ({timestamp})")
        else:
            lines.append(body)
    return lines
