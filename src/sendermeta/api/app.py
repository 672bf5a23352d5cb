"""FastAPI application exposing sender metadata."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import structlog
from fastapi import Depends, FastAPI, WebSocket

from sendermeta import __version__
from sendermeta.api.dependencies import get_sender_metadata
from sendermeta.core.config.settings import Settings
from sendermeta.core.geo.geoip_service import GeoIPService
from sendermeta.core.log import configure_logging
from sendermeta.core.models.sender import SenderMetadata
from sendermeta.core.sender.derivation import SenderMetadataDeriver

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sendermeta.core.interfaces.geo import IGeoLookup

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None, geo: IGeoLookup | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings (loaded from the environment if None)
        geo: Geo lookup to use instead of the configured GeoIP database

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings()
    configure_logging(settings.logs.level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan handler."""
        owned: GeoIPService | None = None
        lookup = geo
        if lookup is None:
            owned = GeoIPService.from_settings(settings)
            lookup = owned

        app.state.sender_deriver = SenderMetadataDeriver(lookup)
        app.state.trust_forwarded = settings.network.trust_forwarded_headers
        logger.info("Sender metadata service started", geoip=lookup is not None)

        yield

        if owned is not None:
            owned.close()
        logger.info("Sender metadata service stopped")

    app = FastAPI(
        title="sendermeta",
        description="Sender metadata for real-time messaging connections",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health() -> dict[str, Any]:
        """Health check."""
        return {
            "status": "ok",
            "geoip": app.state.sender_deriver.geo is not None,
        }

    @app.get("/sender", response_model_exclude_none=True)
    async def sender(
        metadata: SenderMetadata = Depends(get_sender_metadata),
    ) -> SenderMetadata:
        """Metadata describing the caller."""
        return metadata

    @app.websocket("/ws")
    async def sender_ws(
        websocket: WebSocket,
        metadata: SenderMetadata = Depends(get_sender_metadata),
    ) -> None:
        """Send the connection's sender metadata, then close."""
        await websocket.accept()
        await websocket.send_json({"type": "sender", "data": metadata.to_dict()})
        await websocket.close()

    return app
