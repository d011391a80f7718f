"""User directory built from a Slack export's users.json."""

import logging

from pydantic import ValidationError

from slack_relay.models.export import NamedDocument, SlackUser, User

logger = logging.getLogger(__name__)

USERS_FILE_NAME = "users.json"


def find_users_document(documents: list[NamedDocument]) -> NamedDocument | None:
    """Return the document named exactly users.json, or None."""
    return next((d for d in documents if d.name == USERS_FILE_NAME), None)


def build_directory(document: NamedDocument) -> dict[str, User]:
    """Map Slack user ID to User for every usable entry in users.json.

    Entries that are not objects, fail to decode, or carry no ``id`` are
    skipped. A later entry with the same ID replaces an earlier one.
    """
    directory: dict[str, User] = {}
    for index, entry in enumerate(document.content):
        try:
            slack_user = SlackUser.model_validate(entry)
        except ValidationError:
            logger.warning("Skipping malformed user entry at index %d", index)
            continue

        if not slack_user.id:
            logger.warning("Skipping user entry without id at index %d", index)
            continue

        directory[slack_user.id] = User(
            id=slack_user.id, display_name=slack_user.display_name()
        )

    return directory
