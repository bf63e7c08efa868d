"""Attribute, text and inner-markup extraction from isolated element spans."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING

from .constants import ANY_TAG_MARKUP_RE, INNER_HTML_RE

if TYPE_CHECKING:
    from collections.abc import Iterable


@lru_cache(maxsize=256)
def _attr_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf'\b{re.escape(name)}="([^"]*)"', re.IGNORECASE)


def get_attr(element: str, name: str) -> str | None:
    """Return the value of the first `name="..."` in element, or None.

    The whole span is searched, not only the opening tag. In practice the
    opening tag comes first, but an attribute missing there can be picked
    up from child markup.
    """
    if not name:
        return None
    match = _attr_pattern(name).search(element)
    return match.group(1) if match else None


def get_attrs(elements: Iterable[str], name: str) -> list[str | None]:
    """Return get_attr for each element, in order."""
    return [get_attr(element, name) for element in elements]


def get_text(element: str) -> str:
    """Strip every tag and surrounding whitespace. Entities are left as is."""
    return ANY_TAG_MARKUP_RE.sub("", element).strip()


def inner_html(element: str) -> str:
    """Return the markup between the outermost opening and closing tags.

    Input that does not look like `<x ...>...</x>` is returned unchanged.
    """
    match = INNER_HTML_RE.match(element)
    return match.group(1) if match else element
