"""Connection source interface definitions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IConnectionSource(Protocol):
    """Contract for the inbound connection being described."""

    def get_header(self, name: str) -> str | bytes | None:
        """
        Look up a request header.

        Args:
            name: Header name, matched case-insensitively

        Returns:
            Raw header value, or None if the header is missing
        """
        ...

    @property
    def remote_addr(self) -> str | None:
        """Reported remote address of the connection, if known."""
        ...
