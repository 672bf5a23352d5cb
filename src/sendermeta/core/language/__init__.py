"""Accept-Language parsing and localized name selection."""

from sendermeta.core.language.preferences import (
    DEFAULT_LANGUAGE,
    parse_preferences,
    resolve_preferences,
)
from sendermeta.core.language.selector import select_localized

__all__ = [
    "DEFAULT_LANGUAGE",
    "parse_preferences",
    "resolve_preferences",
    "select_localized",
]
