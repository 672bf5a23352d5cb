"""Sender metadata derivation.

Builds a SenderMetadata from an inbound connection:
- User agent from the User-Agent header
- Remote address as reported by the connection
- City, region and country from a geo lookup, localized to the
  languages of the Accept-Language header

Every step degrades independently: a bad header, an unparsable address or a
failed lookup only leaves the corresponding fields unset.
"""

from __future__ import annotations

import ipaddress
from typing import TYPE_CHECKING

import structlog

from sendermeta.core.errors import HeaderDecodeError
from sendermeta.core.language.preferences import DEFAULT_LANGUAGE, parse_preferences
from sendermeta.core.language.selector import select_localized
from sendermeta.core.models.sender import SenderMetadata

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sendermeta.core.interfaces.connection import IConnectionSource
    from sendermeta.core.interfaces.geo import IGeoLookup
    from sendermeta.core.models.geo import GeoPlace

logger = structlog.get_logger(__name__)

ACCEPT_LANGUAGE = "accept-language"
USER_AGENT = "user-agent"


def _is_header_byte(b: int) -> bool:
    return b == 0x09 or 0x20 <= b <= 0x7E


def decode_header(name: str, value: str | bytes) -> str:
    """Decode a header value to text.

    Byte values must be visible ASCII (or tab).

    Raises:
        HeaderDecodeError: If the value contains any other byte
    """
    if isinstance(value, str):
        return value
    if not all(_is_header_byte(b) for b in value):
        raise HeaderDecodeError(name, value)
    return value.decode("ascii")


class SenderMetadataDeriver:
    """Derives SenderMetadata for inbound connections.

    Stateless apart from the injected geo lookup; one instance can serve
    any number of connections concurrently.

    Usage:
        deriver = SenderMetadataDeriver(geo=GeoIPService("GeoLite2-City.mmdb"))
        sender = deriver.derive(connection)
    """

    def __init__(self, geo: IGeoLookup | None = None) -> None:
        """Initialize deriver.

        Args:
            geo: Geo lookup used to locate remote addresses (None disables it)
        """
        self.geo = geo

    def derive(self, source: IConnectionSource) -> SenderMetadata:
        """Derive sender metadata for a connection.

        Args:
            source: Connection exposing headers and the remote address

        Returns:
            SenderMetadata with whatever fields could be determined
        """
        langs = self._languages(source)
        ua = self._header_text(source, USER_AGENT)
        addr = source.remote_addr or None

        city = region = country = None
        if addr is not None:
            city, region, country = self._locate(addr, langs)

        return SenderMetadata(
            ua=ua,
            addr=addr,
            city=city,
            region=region,
            country=country,
        )

    def _header_text(self, source: IConnectionSource, name: str) -> str | None:
        """Header value as text, or None if missing or undecodable."""
        value = source.get_header(name)
        if value is None:
            return None
        try:
            return decode_header(name, value)
        except HeaderDecodeError as e:
            logger.warning("Bad header value", header=name, error=str(e))
            return None

    def _languages(self, source: IConnectionSource) -> list[str]:
        header = self._header_text(source, ACCEPT_LANGUAGE)
        if header is None:
            return [DEFAULT_LANGUAGE]
        return parse_preferences(header)

    def _locate(
        self,
        addr: str,
        langs: Sequence[str],
    ) -> tuple[str | None, str | None, str | None]:
        """Localized (city, region, country) for an address."""
        if self.geo is None:
            return None, None, None

        try:
            ip = ipaddress.ip_address(addr)
        except ValueError:
            logger.debug("Remote address is not an IP address", addr=addr)
            return None, None, None

        try:
            record = self.geo.lookup(ip)
        except Exception as e:
            logger.warning("Geo lookup failed", addr=addr, error=str(e))
            return None, None, None

        if record is None:
            return None, None, None

        # Only the top-level subdivision is used as the region.
        return (
            _localized(record.city, langs),
            _localized(record.first_subdivision, langs),
            _localized(record.country, langs),
        )


def _localized(place: GeoPlace | None, langs: Sequence[str]) -> str | None:
    if place is None or not place.names:
        return None
    return select_localized(langs, place.names)


def derive_sender_metadata(
    source: IConnectionSource,
    geo: IGeoLookup | None = None,
) -> SenderMetadata:
    """Derive sender metadata for a connection (see SenderMetadataDeriver)."""
    return SenderMetadataDeriver(geo).derive(source)
