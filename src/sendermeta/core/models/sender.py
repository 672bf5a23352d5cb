"""Sender metadata model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class SenderMetadata(BaseModel):
    """Description of a connection's originator.

    Every field is optional and only set when it could be determined.
    Absent fields are omitted on serialization, never emitted as null.
    """

    model_config = ConfigDict(frozen=True)

    ua: str | None = None
    addr: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None

    @property
    def is_empty(self) -> bool:
        """Check if nothing about the sender is known."""
        return not self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting absent fields."""
        return self.model_dump(exclude_none=True)

    def to_json(self) -> str:
        """Serialize to JSON, omitting absent fields."""
        return self.model_dump_json(exclude_none=True)
