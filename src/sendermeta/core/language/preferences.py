"""Accept-Language header parsing.

Produces a ranked list of lowercase language tags, most preferred first,
always terminated by the default language.

Ranking is done on the weight *text*, not its numeric value: entries are
keyed by their weight expression (``"q=0.5"``) and unweighted entries get a
synthetic ``"q=1.NN"`` key, the keys are sorted as strings and the result is
reversed. So for ``"en-US,es;q=0.1,en;q=0.5"`` the ranking is
``["en-us", "en", "es", "en"]``.
"""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

# Prefix for unweighted entries. Sorts above any "q=0.x" weight.
_UNWEIGHTED_KEY = "q=1."


def parse_preferences(header: str) -> list[str]:
    """Parse an Accept-Language value into ranked language tags.

    Args:
        header: Raw header value, e.g. ``"en-US,es;q=0.1"``

    Returns:
        Lowercase tags, most preferred first, ending with ``DEFAULT_LANGUAGE``
    """
    ranked: dict[str, str] = {}
    unweighted = 0

    for entry in header.split(","):
        if ";" in entry:
            lang, _, weight = entry.partition(";")
            lang, weight = lang.lower(), weight.lower()
            # Same weight text from a later entry replaces the earlier one.
            ranked[weight] = lang
        else:
            ranked[f"{_UNWEIGHTED_KEY}{unweighted:02}"] = entry.lower()
            unweighted += 1

    langs = [ranked[key] for key in sorted(ranked)]
    langs.reverse()
    langs.append(DEFAULT_LANGUAGE)
    return langs


def resolve_preferences(header: str | None) -> list[str]:
    """Ranked languages for an optional header; ``[DEFAULT_LANGUAGE]`` if absent."""
    if header is None:
        return [DEFAULT_LANGUAGE]
    return parse_preferences(header)
