"""GeoIP lookup service using MaxMind GeoIP2 / GeoLite2 City databases."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import geoip2.database
import geoip2.errors
import structlog

from sendermeta.core.models.geo import GeoPlace, GeoRecord

if TYPE_CHECKING:
    from ipaddress import IPv4Address, IPv6Address

    from sendermeta.core.config.settings import Settings

logger = structlog.get_logger(__name__)


def _place(record: Any) -> GeoPlace | None:
    """Convert a geoip2 place record, dropping empty name maps."""
    if record is None:
        return None
    names = getattr(record, "names", None)
    return GeoPlace(names=dict(names) if names else None)


def record_from_city(response: Any) -> GeoRecord:
    """Convert a ``geoip2.models.City`` response to a GeoRecord.

    The reader always returns place objects, with empty ``names`` when the
    database has no data; those become places without names.
    """
    return GeoRecord(
        city=_place(response.city),
        country=_place(response.country),
        subdivisions=tuple(_place(s) for s in response.subdivisions or () if s is not None),
    )


class GeoIPService:
    """City-level GeoIP resolution service.

    Wraps a ``geoip2.database.Reader``. Lookups are not cached; each call
    reads the memory-mapped database directly.

    Usage:
        with GeoIPService("GeoLite2-City.mmdb") as geo:
            record = geo.lookup(ipaddress.ip_address("81.2.69.160"))
    """

    def __init__(self, database_path: Path | str, reader: Any | None = None) -> None:
        """Open the GeoIP database.

        Args:
            database_path: Path to a City .mmdb file
            reader: Pre-opened reader (used instead of opening database_path)

        Raises:
            FileNotFoundError: If the database file does not exist
        """
        self.database_path = Path(database_path)
        if reader is None:
            if not self.database_path.exists():
                raise FileNotFoundError(f"GeoIP database not found: {self.database_path}")
            reader = geoip2.database.Reader(str(self.database_path))
            logger.info("GeoIP database loaded", path=str(self.database_path))
        self._reader = reader

    @classmethod
    def from_settings(cls, settings: Settings) -> GeoIPService | None:
        """Create service from settings, or None if no database is configured."""
        if settings.geoip.database_path is None:
            logger.info("No GeoIP database configured, geo lookups disabled")
            return None
        return cls(settings.geoip.database_path)

    def lookup(self, ip: IPv4Address | IPv6Address) -> GeoRecord | None:
        """Look up the location of an address.

        Args:
            ip: Parsed IPv4 or IPv6 address

        Returns:
            GeoRecord, or None if the address is unknown or the lookup failed
        """
        try:
            response = self._reader.city(ip)
        except geoip2.errors.AddressNotFoundError:
            logger.debug("Address not in GeoIP database", ip=str(ip))
            return None
        except ValueError as e:
            logger.debug("GeoIP rejected address", ip=str(ip), error=str(e))
            return None
        except Exception as e:
            logger.warning("GeoIP lookup failed", ip=str(ip), error=str(e))
            return None

        return record_from_city(response)

    def close(self) -> None:
        """Close the underlying database reader."""
        self._reader.close()
        logger.info("GeoIP database closed", path=str(self.database_path))

    def __enter__(self) -> GeoIPService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
