"""Data models."""

from sendermeta.core.models.geo import GeoPlace, GeoRecord
from sendermeta.core.models.sender import SenderMetadata

__all__ = [
    "GeoPlace",
    "GeoRecord",
    "SenderMetadata",
]
