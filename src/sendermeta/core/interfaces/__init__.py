"""Collaborator interface definitions."""

from sendermeta.core.interfaces.connection import IConnectionSource
from sendermeta.core.interfaces.geo import IGeoLookup

__all__ = [
    "IConnectionSource",
    "IGeoLookup",
]
