"""Slug utilities.

Shared helper for turning display names into URL-safe identifiers used in
set slugs.
"""

from __future__ import annotations

import re


def slugify(value: str) -> str:
    """Lowercase a display name and collapse whitespace runs into hyphens.

    Args:
        value: Display name like "Premier League Players".

    Returns:
        Slug string; empty input yields an empty string.

    Examples:
        >>> slugify("Premier League  Players")
        'premier-league-players'
        >>> slugify("  Goalkeepers ")
        'goalkeepers'
    """
    return re.sub(r"\s+", "-", value.strip().lower())
