"""Tests for the documents-to-lines transformation."""

from datetime import timezone

import pytest

from slack_relay.export.errors import MissingUsersFileError
from slack_relay.export.pipeline import build_lines
from slack_relay.models.export import NamedDocument

FMT = "%Y-%m-%d %H:%M:%S"


def _build(documents: list[NamedDocument]) -> list[str]:
    return build_lines(documents, tz=timezone.utc, timestamp_format=FMT)


def test_single_message_end_to_end():
    """One user and one message produce exactly one line."""
    documents = [
        NamedDocument(
            name="general.json",
            content=[{"type": "message", "user": "U1", "text": "hello", "ts": "1.000001"}],
        ),
        NamedDocument(name="users.json", content=[{"id": "U1", "name": "Bob"}]),
    ]
    assert _build(documents) == ["Bob: hello (1970-01-01 00:00:01)"]


def test_files_in_name_order_records_in_ts_order(users_document: NamedDocument):
    """Lines are grouped by file name, then ordered by ts within each file."""
    documents = [
        NamedDocument(
            name="2024-01-02.json",
            content=[
                {"type": "message", "user": "U1", "text": "d2-late", "ts": "20.0"},
                {"type": "message", "user": "U2", "text": "d2-early", "ts": "10.0"},
            ],
        ),
        users_document,
        NamedDocument(
            name="2024-01-01.json",
            content=[
                # ts later than everything in 2024-01-02.json; files are never merged
                {"type": "message", "user": "U2", "text": "d1", "ts": "30.0"},
            ],
        ),
    ]
    lines = _build(documents)
    assert lines == [
        "bob: d1 (1970-01-01 00:00:30)",
        "bob: d2-early (1970-01-01 00:00:10)",
        "Alice: d2-late (1970-01-01 00:00:20)",
    ]


def test_filtered_records_never_appear(users_document: NamedDocument):
    documents = [
        users_document,
        NamedDocument(
            name="general.json",
            content=[
                {"type": "message", "subtype": "channel_join", "user": "U1",
                 "text": "<@U1> has joined the channel", "ts": "1.0"},
                {"type": "message", "user": "U1", "text": "", "ts": "2.0"},
                {"type": "message", "user": "U1", "text": "kept", "ts": "3.0"},
            ],
        ),
    ]
    assert _build(documents) == ["Alice: kept (1970-01-01 00:00:03)"]


def test_long_message_chunks_stay_together(users_document: NamedDocument):
    """Chunks of a long record are emitted consecutively before the next record."""
    documents = [
        users_document,
        NamedDocument(
            name="general.json",
            content=[
                {"type": "message", "user": "U2", "text": "after", "ts": "2.0"},
                {"type": "message", "user": "U1", "text": "x" * 2000, "ts": "1.0"},
            ],
        ),
    ]
    lines = _build(documents)
    assert lines == [
        "Alice: " + "x" * 1900,
        "x" * 100 + " (1970-01-01 00:00:01)",
        "bob: after (1970-01-01 00:00:02)",
    ]


def test_users_only_produces_no_lines(users_document: NamedDocument):
    assert _build([users_document]) == []


def test_missing_users_file_raises():
    documents = [NamedDocument(name="general.json", content=[])]
    with pytest.raises(MissingUsersFileError):
        _build(documents)


def test_invalid_ts_does_not_lose_batch():
    """A record with an unparseable ts is skipped; valid records still render."""
    documents = [
        NamedDocument(name="users.json", content=[{"id": "U1", "name": "Bob"}]),
        NamedDocument(
            name="general.json",
            content=[
                {"type": "message", "user": "U1", "text": "good", "ts": "1.0"},
                {"type": "message", "user": "U1", "text": "bad", "ts": "abc"},
            ],
        ),
    ]
    assert _build(documents) == ["Bob: good (1970-01-01 00:00:01)"]
