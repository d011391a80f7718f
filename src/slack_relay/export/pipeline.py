"""Slack export to Discord lines: users.json lookup, per-file ordering, formatting."""

import logging
from datetime import tzinfo

from slack_relay.export.errors import MissingUsersFileError
from slack_relay.export.formatter import DEFAULT_TIMESTAMP_FORMAT, format_record
from slack_relay.export.normalizer import normalize_records, sort_documents
from slack_relay.export.users import USERS_FILE_NAME, build_directory, find_users_document
from slack_relay.models.export import NamedDocument

logger = logging.getLogger(__name__)


def build_lines(
    documents: list[NamedDocument],
    *,
    tz: tzinfo | None = None,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> list[str]:
    """Turn a set of export documents into the ordered list of lines to send.

    Order is file name, then record ``ts``, then chunk. Records are never
    merged across files.

    Raises:
        MissingUsersFileError: if no document is named users.json.
    """
    users_document = find_users_document(documents)
    if users_document is None:
        raise MissingUsersFileError(f"{USERS_FILE_NAME} is required")

    directory = build_directory(users_document)
    exports = [d for d in documents if d.name != USERS_FILE_NAME]

    lines: list[str] = []
    for document in sort_documents(exports):
        records = normalize_records(document.content)
        logger.info(
            "Formatting %d message(s) from %s", len(records), document.name
        )
        for record in records:
            lines.extend(
                format_record(
                    record, directory, tz=tz, timestamp_format=timestamp_format
                )
            )

    logger.info(
        "Built %d line(s) from %d export file(s), %d known user(s)",
        len(lines),
        len(exports),
        len(directory),
    )
    return lines
