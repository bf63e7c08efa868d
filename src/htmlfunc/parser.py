"""Document handle binding one HTML string to the extraction functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .attrs import get_attr, get_text, inner_html
from .extract import extract_element
from .finders import get_by_class, get_by_data_attr, get_by_tag, get_element_by_id
from .selector import query_selector, query_selector_all

if TYPE_CHECKING:
    from .errors import ParseError


class HtmlFunc:
    __slots__ = ("collect_errors", "errors", "html")

    collect_errors: bool
    errors: list[ParseError]
    html: str

    def __init__(self, html: str | bytes | None = "", *, collect_errors: bool = False) -> None:
        self.collect_errors = bool(collect_errors)
        self.set_html(html)

    def __repr__(self) -> str:
        return f"HtmlFunc({len(self.html)} chars)"

    def set_html(self, html: str | bytes | None) -> HtmlFunc:
        """Bind a new document and clear collected errors. Returns self."""
        if isinstance(html, (bytes, bytearray, memoryview)):
            self.html = bytes(html).decode("utf-8", errors="replace")
        elif html is not None:
            self.html = str(html)
        else:
            self.html = ""
        self.errors = []
        return self

    def _sink(self) -> list[ParseError] | None:
        return self.errors if self.collect_errors else None

    def get_by_class(self, class_name: str, tag: str | None = None) -> list[str]:
        return get_by_class(self.html, class_name, tag, errors=self._sink())

    def get_by_tag(self, tag: str, class_name: str | None = None) -> list[str]:
        return get_by_tag(self.html, tag, class_name, errors=self._sink())

    def get_element_by_id(self, element_id: str) -> list[str]:
        return get_element_by_id(self.html, element_id, errors=self._sink())

    def get_by_data_attr(self, data_attr: str) -> list[str]:
        return get_by_data_attr(self.html, data_attr, errors=self._sink())

    def query_selector(self, selector: str) -> str | None:
        return query_selector(self.html, selector, errors=self._sink())

    def query_selector_all(self, selector: str) -> list[str]:
        return query_selector_all(self.html, selector, errors=self._sink())

    def extract_element(self, start_pos: int, tag_name: str) -> str | None:
        return extract_element(self.html, start_pos, tag_name)

    def get_attr(self, name: str) -> str | None:
        """Attribute value from the bound document itself (usually one element)."""
        return get_attr(self.html, name)

    def get_text(self) -> str:
        return get_text(self.html)

    def inner_html(self) -> str:
        return inner_html(self.html)
