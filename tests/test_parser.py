from __future__ import annotations

import unittest

from htmlfunc import HtmlFunc, ParseError

HTML = (
    '<ul id="list">'
    '<li class="item" data-id="1"><a href="/1">One</a></li>'
    '<li class="item" data-id="2"><a href="/2">Two</a></li>'
    "</ul>"
)


class TestHtmlFunc(unittest.TestCase):
    def test_forwards_finders(self) -> None:
        doc = HtmlFunc(HTML)
        assert len(doc.get_by_class("item")) == 2
        assert len(doc.get_by_class("item", "li")) == 2
        assert doc.get_by_tag("a") == ['<a href="/1">One</a>', '<a href="/2">Two</a>']
        assert doc.get_by_tag("li", "item") == doc.get_by_class("item", "li")
        assert doc.get_element_by_id("list") == [HTML]
        assert len(doc.get_by_data_attr("id")) == 2

    def test_forwards_selectors(self) -> None:
        doc = HtmlFunc(HTML)
        assert doc.query_selector("li.item") == '<li class="item" data-id="1"><a href="/1">One</a></li>'
        assert doc.query_selector_all("#list") == [HTML]
        assert doc.query_selector("table") is None

    def test_extract_element(self) -> None:
        doc = HtmlFunc(HTML)
        assert doc.extract_element(0, "ul") == HTML
        assert doc.extract_element(1, "ul") is None

    def test_element_helpers_use_bound_document(self) -> None:
        doc = HtmlFunc('<a href="/x"> <b>Hi</b> </a>')
        assert doc.get_attr("href") == "/x"
        assert doc.get_text() == "Hi"
        assert doc.inner_html() == " <b>Hi</b> "

    def test_set_html_chains_and_rebinds(self) -> None:
        doc = HtmlFunc()
        assert doc.html == ""
        assert doc.set_html("<p>x</p>") is doc
        assert doc.get_by_tag("p") == ["<p>x</p>"]

    def test_bytes_and_none_input(self) -> None:
        assert HtmlFunc("<p>é</p>".encode()).get_text() == "é"
        assert HtmlFunc(b"<p>\xff</p>").get_text() == "\ufffd"
        assert HtmlFunc(None).html == ""

    def test_errors_not_collected_by_default(self) -> None:
        doc = HtmlFunc('<div class="x">')
        assert doc.get_by_class("x") == []
        assert doc.errors == []

    def test_collect_errors(self) -> None:
        doc = HtmlFunc('<div class="x">\n<div class="x">', collect_errors=True)
        assert doc.query_selector_all(".x") == []
        assert doc.errors == [
            ParseError("unterminated-element", line=1, column=1),
            ParseError("unterminated-element", line=2, column=1),
        ]
        doc.set_html("<p>ok</p>")
        assert doc.errors == []

    def test_repr(self) -> None:
        assert repr(HtmlFunc("<p></p>")) == "HtmlFunc(7 chars)"
