"""Slug and reading-time helpers.

Pure functions shared by the relational store, the markdown store and the
content resolver.
"""

import math
import re

SLUG_MAX_LENGTH = 100
DEFAULT_WORDS_PER_MINUTE = 200

_RE_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_RE_WHITESPACE = re.compile(r"\s+")
_RE_TAG_INVALID = re.compile(r"[^a-z0-9-]")


def generate_slug(title: str) -> str:
    """Convert a title to a URL-safe slug.

    - Converts to lowercase
    - Replaces each run of non-alphanumeric characters with one hyphen
    - Strips leading/trailing hyphens
    - Truncates to 100 characters

    Args:
        title: Title to slugify

    Returns:
        Slug string (empty if the title has no alphanumeric characters)
    """
    slug = _RE_NON_ALNUM.sub("-", title.lower()).strip("-")
    # Truncation can expose a hyphen at the cut point
    return slug[:SLUG_MAX_LENGTH].rstrip("-")


def generate_tag_slug(name: str) -> str:
    """Convert a tag name to its slug.

    Lowercases, collapses whitespace runs to a hyphen and drops every
    character outside ``[a-z0-9-]``.

    Args:
        name: Tag name

    Returns:
        Tag slug (may be empty)
    """
    slug = _RE_WHITESPACE.sub("-", name.strip().lower())
    return _RE_TAG_INVALID.sub("", slug)


def count_words(content: str) -> int:
    """Count whitespace-separated words."""
    return len(content.split())


def estimate_reading_time(
    content: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> int:
    """Estimate reading time in whole minutes.

    Args:
        content: Post body
        words_per_minute: Assumed reading speed

    Returns:
        Minutes, rounded up, never less than 1
    """
    minutes = math.ceil(count_words(content) / max(words_per_minute, 1))
    return max(1, minutes)
