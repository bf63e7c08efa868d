"""Scans that locate every element matching one criterion.

Each finder searches for candidate opening tags with a single pattern and
hands every hit to the element resolver. Candidates that do not resolve
(no matching close tag before the end of the document) are skipped and the
scan carries on; pass a list as `errors` to receive one ParseError per
skipped candidate.

Tag and attribute names match case-insensitively. Attribute values
(class tokens, ids) match case-sensitively, as literal text.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING

from .constants import ANY_TAG, TAG_BODY, TAG_NAME_END, TAG_NAME_RE
from .errors import unterminated_element
from .extract import extract_element
from .scanner import open_tag_pattern

if TYPE_CHECKING:
    from .errors import ParseError


def _tag_group(tag):
    if tag is None:
        return f"({ANY_TAG})"
    if not TAG_NAME_RE.match(tag):
        return None
    return f"((?i:{tag}))"


@lru_cache(maxsize=256)
def _class_pattern(class_name, tag):
    tag_group = _tag_group(tag)
    if tag_group is None:
        return None
    cls = re.escape(class_name)
    return re.compile(
        rf'<{tag_group}{TAG_NAME_END}{TAG_BODY}\b(?i:class)="[^"]*\b{cls}\b[^"]*"{TAG_BODY}>',
    )


@lru_cache(maxsize=256)
def _id_pattern(element_id):
    return re.compile(
        rf'<({ANY_TAG}){TAG_NAME_END}{TAG_BODY}\b(?i:id)="{re.escape(element_id)}"{TAG_BODY}>',
    )


@lru_cache(maxsize=256)
def _data_attr_pattern(data_attr):
    return re.compile(
        rf'<({ANY_TAG}){TAG_NAME_END}{TAG_BODY}\b(?i:data-{re.escape(data_attr)})="[^"]*"{TAG_BODY}>',
    )


def _resolve(html, match, tag_name, errors):
    element = extract_element(html, match.start(), tag_name)
    if element is None and errors is not None:
        errors.append(unterminated_element(html, match.start(), tag_name))
    return element


def _resolve_all(html, matches, errors, tag_name=None):
    elements = []
    for match in matches:
        element = _resolve(html, match, tag_name or match.group(1), errors)
        if element is not None:
            elements.append(element)
    return elements


def get_by_class(
    html: str,
    class_name: str,
    tag: str | None = None,
    *,
    errors: list[ParseError] | None = None,
) -> list[str]:
    """Return every element whose class attribute contains class_name.

    `tag` restricts the search to one tag name; by default any tag matches.
    The class token is delimited by word boundaries, so "item" also matches
    inside "flw-item".
    """
    if not class_name:
        return []
    pattern = _class_pattern(class_name, tag)
    if pattern is None:
        return []
    return _resolve_all(html, pattern.finditer(html), errors)


def get_by_tag(
    html: str,
    tag: str,
    class_name: str | None = None,
    *,
    errors: list[ParseError] | None = None,
) -> list[str]:
    """Return every `tag` element, optionally restricted to a class."""
    if class_name:
        return get_by_class(html, class_name, tag, errors=errors)

    pattern = open_tag_pattern(tag)
    if pattern is None:
        return []
    return _resolve_all(html, pattern.finditer(html), errors, tag_name=tag)


def get_element_by_id(
    html: str,
    element_id: str,
    *,
    errors: list[ParseError] | None = None,
) -> list[str]:
    """Return a list holding the first element with this id, if it resolves.

    Only the first opening tag carrying the id is considered; later
    duplicates are never looked at.
    """
    if not element_id:
        return []
    match = _id_pattern(element_id).search(html)
    if match is None:
        return []
    element = _resolve(html, match, match.group(1), errors)
    return [element] if element is not None else []


def get_by_data_attr(
    html: str,
    data_attr: str,
    *,
    errors: list[ParseError] | None = None,
) -> list[str]:
    """Return every element carrying `data-<data_attr>="..."`."""
    if not data_attr:
        return []
    return _resolve_all(html, _data_attr_pattern(data_attr).finditer(html), errors)
