"""Resolve the full span of one element by tracking same-name nesting depth."""

from __future__ import annotations

from .scanner import find_close_tag, find_open_tag, match_open_tag


def resolve_span(html: str, start_pos: int, tag_name: str) -> tuple[int, int] | None:
    """Return (start, end) offsets of the balanced element opening at start_pos.

    Only tags named `tag_name` count towards depth; other markup is free text
    as far as the resolver is concerned. Returns None when no opening tag
    begins at start_pos or when the document ends before depth returns to
    zero. A partial span is never returned.

    Void and self-closing elements are not recognized: a tag that never
    recurs as a closing tag does not resolve.
    """
    opening = match_open_tag(html, tag_name, start_pos)
    if opening is None:
        return None

    depth = 1
    cursor = opening.end()
    # A match found ahead of the cursor stays valid until consumed, except a
    # closing tag swallowed by the attribute text of a longer opening tag.
    next_open = find_open_tag(html, tag_name, cursor)
    next_close = find_close_tag(html, tag_name, cursor)
    while depth > 0:
        if next_close is None:
            return None
        # Positions can never tie: one offset starts either "<x" or "</x".
        if next_open is not None and next_open.start() < next_close.start():
            cursor = next_open.end()
            depth += 1
            next_open = find_open_tag(html, tag_name, cursor)
            if next_close.start() < cursor:
                next_close = find_close_tag(html, tag_name, cursor)
        else:
            cursor = next_close.end()
            depth -= 1
            next_close = find_close_tag(html, tag_name, cursor)

    return start_pos, cursor


def extract_element(html: str, start_pos: int, tag_name: str) -> str | None:
    """Return the element text starting at start_pos, or None if unresolvable."""
    span = resolve_span(html, start_pos, tag_name)
    if span is None:
        return None
    start, end = span
    return html[start:end]
