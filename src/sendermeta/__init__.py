"""Sender metadata for real-time messaging connections."""

from __future__ import annotations

from sendermeta.core.language.preferences import DEFAULT_LANGUAGE, parse_preferences
from sendermeta.core.language.selector import select_localized
from sendermeta.core.models.sender import SenderMetadata
from sendermeta.core.sender.derivation import SenderMetadataDeriver, derive_sender_metadata

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LANGUAGE",
    "SenderMetadata",
    "SenderMetadataDeriver",
    "__version__",
    "derive_sender_metadata",
    "parse_preferences",
    "select_localized",
]
