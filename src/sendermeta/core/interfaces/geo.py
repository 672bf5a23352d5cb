"""Geo lookup interface definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ipaddress import IPv4Address, IPv6Address

    from sendermeta.core.models.geo import GeoRecord


@runtime_checkable
class IGeoLookup(Protocol):
    """Contract for geo databases keyed by IP address."""

    def lookup(self, ip: IPv4Address | IPv6Address) -> GeoRecord | None:
        """
        Look up the location of an address.

        Args:
            ip: Parsed IPv4 or IPv6 address

        Returns:
            GeoRecord, or None for unknown, private or reserved addresses
            and on database errors. Never raises for a single address.
        """
        ...
