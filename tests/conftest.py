"""Global test fixtures for sendermeta."""

from __future__ import annotations

# Import pytest plugins
from tests.pytest_plugins.markers import (
    pytest_addoption,
    pytest_collection_modifyitems,
    pytest_configure,
)
from tests.pytest_plugins.mock_services import (
    FakeGeoLookup,
    california_names,
    fake_geo,
    make_source,
)

# Re-export for pytest discovery
__all__ = [
    "FakeGeoLookup",
    "california_names",
    "fake_geo",
    "make_source",
    "pytest_addoption",
    "pytest_collection_modifyitems",
    "pytest_configure",
]
