"""Geo lookup result models.

Shape of a city-level geo database record as far as sender metadata is
concerned: localized names for the city, the country and each subdivision
(state, province, ...), most significant subdivision first.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GeoPlace:
    """A named place with its names keyed by language tag."""

    names: Mapping[str, str] | None = None


@dataclass(frozen=True)
class GeoRecord:
    """Result of a single address lookup."""

    city: GeoPlace | None = None
    country: GeoPlace | None = None
    subdivisions: tuple[GeoPlace, ...] = field(default_factory=tuple)

    @property
    def first_subdivision(self) -> GeoPlace | None:
        """Top-level subdivision, if any."""
        return self.subdivisions[0] if self.subdivisions else None
