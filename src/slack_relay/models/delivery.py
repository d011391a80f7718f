"""Outcome of sending one formatted line to Discord."""

from pydantic import BaseModel


class DeliveryResult(BaseModel):
    """Per-line delivery outcome. ``error`` is set only when ``delivered`` is False."""

    line: str
    delivered: bool
    error: str | None = None
