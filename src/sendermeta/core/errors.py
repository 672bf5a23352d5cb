"""Exceptions raised inside sender metadata derivation."""

from __future__ import annotations


class SenderMetaError(Exception):
    """Base class for sendermeta errors."""


class HeaderDecodeError(SenderMetaError):
    """Header value is not valid header text."""

    def __init__(self, header: str, value: bytes) -> None:
        self.header = header
        self.value = value
        super().__init__(f"Header {header!r} is not valid text: {value!r}")
