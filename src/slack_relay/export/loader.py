"""Concurrent download and JSON parsing of message attachments."""

import asyncio
import json
import logging

import httpx

from slack_relay.export.errors import AttachmentLoadError
from slack_relay.models.export import AttachmentRef, NamedDocument

logger = logging.getLogger(__name__)


async def fetch_document(
    client: httpx.AsyncClient, attachment: AttachmentRef
) -> NamedDocument:
    """Download one attachment and parse it as a JSON array.

    Raises AttachmentLoadError on network errors, non-2xx responses,
    invalid JSON, or a top-level value that is not an array.
    """
    try:
        response = await client.get(attachment.url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise AttachmentLoadError(attachment.name, str(exc)) from exc

    try:
        content = json.loads(response.content)
    except ValueError as exc:
        raise AttachmentLoadError(attachment.name, f"invalid JSON ({exc})") from exc

    if not isinstance(content, list):
        raise AttachmentLoadError(
            attachment.name, f"expected a JSON array, got {type(content).__name__}"
        )

    logger.info("Loaded %s (%d entries)", attachment.name, len(content))
    return NamedDocument(name=attachment.name, content=content)


async def fetch_documents(
    attachments: list[AttachmentRef], timeout_seconds: float = 30.0
) -> list[NamedDocument]:
    """Fetch all attachments in parallel.

    Results are returned in the same order as ``attachments``. The first
    failure propagates and the request is abandoned; no partial result
    is returned.
    """
    async with httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(timeout_seconds),
    ) as client:
        return list(
            await asyncio.gather(*[fetch_document(client, a) for a in attachments])
        )
