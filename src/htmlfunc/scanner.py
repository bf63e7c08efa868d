"""Locate literal opening and closing tags for one tag name.

Patterns are compiled once per tag name. Matching on the name is
case-insensitive; nothing is decoded, so the scanner works on raw markup.
"""

from __future__ import annotations

import re
from functools import lru_cache

from .constants import TAG_BODY, TAG_NAME_END, TAG_NAME_RE


@lru_cache(maxsize=256)
def open_tag_pattern(tag: str) -> re.Pattern[str] | None:
    if not TAG_NAME_RE.match(tag):
        return None
    return re.compile(f"<{tag}{TAG_NAME_END}{TAG_BODY}>", re.IGNORECASE)


@lru_cache(maxsize=256)
def close_tag_pattern(tag: str) -> re.Pattern[str] | None:
    if not TAG_NAME_RE.match(tag):
        return None
    return re.compile(rf"</{tag}\s*>", re.IGNORECASE)


def find_open_tag(html: str, tag: str, pos: int = 0) -> re.Match[str] | None:
    """Return the next opening tag for `tag` at or after pos, or None."""
    pattern = open_tag_pattern(tag)
    if pattern is None:
        return None
    return pattern.search(html, pos)


def find_close_tag(html: str, tag: str, pos: int = 0) -> re.Match[str] | None:
    """Return the next closing tag for `tag` at or after pos, or None."""
    pattern = close_tag_pattern(tag)
    if pattern is None:
        return None
    return pattern.search(html, pos)


def match_open_tag(html: str, tag: str, pos: int) -> re.Match[str] | None:
    """Return the opening tag for `tag` only if it begins exactly at pos."""
    pattern = open_tag_pattern(tag)
    if pattern is None:
        return None
    return pattern.match(html, pos)
