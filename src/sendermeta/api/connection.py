"""Connection source adapter for Starlette/FastAPI connections."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sendermeta.core.network.remote import resolve_remote_address

if TYPE_CHECKING:
    from starlette.requests import HTTPConnection


class StarletteConnectionSource:
    """IConnectionSource over a Starlette HTTPConnection.

    Works for both HTTP requests and WebSockets. Header values are returned
    as the raw bytes from the ASGI scope so undecodable values can be told
    apart from missing ones.
    """

    def __init__(self, connection: HTTPConnection, *, trust_forwarded: bool = False) -> None:
        self.connection = connection
        self.trust_forwarded = trust_forwarded

    def get_header(self, name: str) -> bytes | None:
        key = name.lower().encode("latin-1")
        for header, value in self.connection.scope.get("headers", []):
            if header.lower() == key:
                return value
        return None

    @property
    def remote_addr(self) -> str | None:
        client = self.connection.client
        return resolve_remote_address(
            self.connection.headers.get,
            client.host if client else None,
            trust_forwarded=self.trust_forwarded,
        )
