"""Exceptions raised by the export transformation pipeline."""


class ExportError(Exception):
    """Base class for errors that abort processing of one trigger message."""


class AttachmentLoadError(ExportError):
    """An attachment could not be fetched or is not a JSON array."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Failed to load attachment {name!r}: {reason}")
        self.name = name
        self.reason = reason


class MissingUsersFileError(ExportError):
    """No users.json document was supplied."""
