# Restricted CSS selector support: tag, #id, .class, tag#id, tag.class.
# Anything else (combinators, lists, attributes, pseudo-classes) matches
# nothing rather than raising.

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from .constants import SELECTOR_RE
from .finders import get_by_class, get_by_tag, get_element_by_id

if TYPE_CHECKING:
    from .errors import ParseError


class ParsedSelector(NamedTuple):
    tag: str | None
    id: str | None
    class_name: str | None


def parse_selector(selector: str) -> ParsedSelector | None:
    """Split a selector into its tag, id and class parts.

    Returns None when the selector is outside the supported grammar.
    """
    match = SELECTOR_RE.match(selector)
    if match is None:
        return None
    tag, id_part, class_part = match.groups()
    return ParsedSelector(
        tag=tag or None,
        id=id_part[1:] if id_part else None,
        class_name=class_part[1:] if class_part else None,
    )


def query_selector_all(
    html: str,
    selector: str,
    *,
    errors: list[ParseError] | None = None,
) -> list[str]:
    """Return every element matching selector, in document order.

    An id wins over everything else in the selector, then tag with class,
    then class alone, then tag alone.
    """
    parsed = parse_selector(selector)
    if parsed is None:
        return []

    if parsed.id:
        return get_element_by_id(html, parsed.id, errors=errors)
    if parsed.tag and parsed.class_name:
        return get_by_class(html, parsed.class_name, parsed.tag, errors=errors)
    if parsed.class_name:
        return get_by_class(html, parsed.class_name, errors=errors)
    if parsed.tag:
        return get_by_tag(html, parsed.tag, errors=errors)
    return []


def query_selector(
    html: str,
    selector: str,
    *,
    errors: list[ParseError] | None = None,
) -> str | None:
    """Return the first element matching selector, or None."""
    elements = query_selector_all(html, selector, errors=errors)
    return elements[0] if elements else None
