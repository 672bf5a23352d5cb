"""Sender metadata derivation."""

from sendermeta.core.sender.derivation import (
    ACCEPT_LANGUAGE,
    USER_AGENT,
    SenderMetadataDeriver,
    decode_header,
    derive_sender_metadata,
)
from sendermeta.core.sender.sources import HeaderMapSource

__all__ = [
    "ACCEPT_LANGUAGE",
    "USER_AGENT",
    "HeaderMapSource",
    "SenderMetadataDeriver",
    "decode_header",
    "derive_sender_metadata",
]
