"""GeoIP lookup backed by MaxMind databases."""

from sendermeta.core.geo.geoip_service import GeoIPService, record_from_city

__all__ = [
    "GeoIPService",
    "record_from_city",
]
