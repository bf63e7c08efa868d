from .attrs import get_attr, get_attrs, get_text, inner_html
from .errors import ParseError
from .extract import extract_element, resolve_span
from .finders import get_by_class, get_by_data_attr, get_by_tag, get_element_by_id
from .parser import HtmlFunc
from .selector import ParsedSelector, parse_selector, query_selector, query_selector_all

__all__ = [
    "HtmlFunc",
    "ParseError",
    "ParsedSelector",
    "extract_element",
    "get_attr",
    "get_attrs",
    "get_by_class",
    "get_by_data_attr",
    "get_by_tag",
    "get_element_by_id",
    "get_text",
    "inner_html",
    "parse_selector",
    "query_selector",
    "query_selector_all",
    "resolve_span",
]
