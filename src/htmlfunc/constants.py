"""Shared patterns and names used across the extraction modules."""

import re

# Any tag name, used when a finder is not restricted to one tag.
ANY_TAG = r"[a-zA-Z][a-zA-Z0-9]*"

TAG_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9]*\Z")

# A tag name ends at whitespace, "/" or ">" so <a> never matches <abbr>.
TAG_NAME_END = r"(?=[\s/>])"

# Anything inside a tag up to the closing ">". Attribute values containing
# ">" break this (accepted limitation).
TAG_BODY = r"[^>]*"

# Restricted selector grammar: tag, #id, .class, in that order only.
SELECTOR_RE = re.compile(r"([a-zA-Z0-9]*)?(#[a-zA-Z0-9_-]+)?(\.[a-zA-Z0-9_-]+)?\Z")

ANY_TAG_MARKUP_RE = re.compile(r"<[^>]*>")

# First "<...>" and last "</...>" of an element; DOTALL so inner newlines survive.
INNER_HTML_RE = re.compile(r"<[^>]*>(.*)</[^>]*>\Z", re.DOTALL)

UNTERMINATED_ELEMENT = "unterminated-element"
