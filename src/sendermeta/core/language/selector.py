"""Pick the best localized string for a ranked language list."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

# Length of a base language subtag ("en" in "en-us").
_BASE_LANGUAGE_LEN = 2


def select_localized(langs: Sequence[str], names: Mapping[str, str]) -> str | None:
    """Return the name matching the most preferred language.

    Each language is tried exactly first, then, for dialect tags such as
    ``"en-us"``, by its base language. An earlier preference always wins
    over a later one.

    Args:
        langs: Ranked language tags, most preferred first
        names: Localized names keyed by language tag

    Returns:
        Matching name, or None if no language matches
    """
    for lang in langs:
        if lang in names:
            return names[lang]
        if "-" in lang:
            base = lang[:_BASE_LANGUAGE_LEN]
            if base in names:
                return names[base]
    return None
