"""URL slug generation for recipe titles."""

from __future__ import annotations

import re


_DISALLOWED = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def slugify(title: str) -> str:
    """Derive a URL-safe slug from a title.

    Lower-cases and trims the title, drops anything that is not an ASCII
    word character, whitespace or hyphen, collapses separator runs into a single
    hyphen and strips hyphens from both ends. Uniqueness is not checked.

    Example:
        >>> slugify("Spaghetti Carbonara!")
        'spaghetti-carbonara'
    """
    slug = _DISALLOWED.sub("", title.lower().strip())
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")
