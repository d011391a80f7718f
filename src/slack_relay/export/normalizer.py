"""Filtering and chronological ordering of channel export records."""

import logging
import math
from datetime import datetime, timezone

from pydantic import ValidationError

from slack_relay.models.export import NamedDocument, SlackRecord

logger = logging.getLogger(__name__)

# Membership notices carry text ("<@U123> has joined the channel") but no content
_SKIPPED_SUBTYPES = frozenset({"channel_join"})


def is_message_record(record: SlackRecord) -> bool:
    """Return True if the record is a plain message worth relaying."""
    return (
        record.type == "message"
        and record.subtype not in _SKIPPED_SUBTYPES
        and bool(record.text)
        and bool(record.ts)
    )


def has_valid_ts(ts: str | None) -> bool:
    """Return True if ``ts`` is a finite epoch-seconds value a datetime can hold."""
    if not ts:
        return False
    try:
        seconds = float(ts)
    except ValueError:
        return False
    if not math.isfinite(seconds):
        return False
    try:
        datetime.fromtimestamp(int(seconds), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return False
    return True


def decode_records(content: list) -> list[SlackRecord]:
    """Decode raw export entries, skipping those with wrongly typed fields."""
    records: list[SlackRecord] = []
    for index, entry in enumerate(content):
        try:
            records.append(SlackRecord.model_validate(entry))
        except ValidationError:
            logger.warning("Skipping malformed export record at index %d", index)
    return records


def normalize_records(content: list) -> list[SlackRecord]:
    """Decode, filter and sort one export file's records by ``ts``.

    Records whose ``ts`` is not a usable timestamp are skipped with a warning.
    Sorting compares ``ts`` as strings. Slack timestamps have a fixed-width
    seconds part in any realistic range, so this matches numeric order.
    """
    records: list[SlackRecord] = []
    for record in decode_records(content):
        if not is_message_record(record):
            continue
        if not has_valid_ts(record.ts):
            logger.warning("Skipping export record with invalid ts %r", record.ts)
            continue
        records.append(record)
    return sorted(records, key=lambda r: r.ts)


def sort_documents(documents: list[NamedDocument]) -> list[NamedDocument]:
    """Order export files by name (daily exports are named YYYY-MM-DD.json)."""
    return sorted(documents, key=lambda d: d.name)
