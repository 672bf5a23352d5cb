"""FastAPI dependencies."""

from __future__ import annotations

from starlette.requests import HTTPConnection

from sendermeta.api.connection import StarletteConnectionSource
from sendermeta.core.models.sender import SenderMetadata
from sendermeta.core.sender.derivation import SenderMetadataDeriver


def get_deriver(connection: HTTPConnection) -> SenderMetadataDeriver:
    """Get the application's deriver."""
    deriver = getattr(connection.app.state, "sender_deriver", None)
    if deriver is None:
        raise RuntimeError("Sender deriver not initialized. Use create_app().")
    return deriver


def get_sender_metadata(connection: HTTPConnection) -> SenderMetadata:
    """Derive sender metadata for the current request or WebSocket."""
    deriver = get_deriver(connection)
    trust_forwarded = getattr(connection.app.state, "trust_forwarded", False)
    source = StarletteConnectionSource(connection, trust_forwarded=trust_forwarded)
    return deriver.derive(source)
