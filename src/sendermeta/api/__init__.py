"""FastAPI integration for sender metadata."""

from sendermeta.api.app import create_app
from sendermeta.api.connection import StarletteConnectionSource
from sendermeta.api.dependencies import get_deriver, get_sender_metadata

__all__ = [
    "StarletteConnectionSource",
    "create_app",
    "get_deriver",
    "get_sender_metadata",
]
