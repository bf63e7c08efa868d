from __future__ import annotations

import unittest

from htmlfunc import (
    ParseError,
    get_by_class,
    get_by_data_attr,
    get_by_tag,
    get_element_by_id,
    get_text,
)


class TestGetByClass(unittest.TestCase):
    def test_token_in_multi_class_value(self) -> None:
        html = '<section><p class="a b c">x</p></section>'
        assert get_by_class(html, "b", "p") == ['<p class="a b c">x</p>']

    def test_any_tag_by_default(self) -> None:
        html = '<li class="item">1</li><span class="item">2</span>'
        assert get_by_class(html, "item") == ['<li class="item">1</li>', '<span class="item">2</span>']

    def test_tag_restriction(self) -> None:
        html = '<li class="item">1</li><span class="item">2</span>'
        assert get_by_class(html, "item", "span") == ['<span class="item">2</span>']

    def test_document_order(self) -> None:
        html = '<div class="item">X</div><p>gap</p><div class="item">Y</div><div class="item">Z</div>'
        assert [get_text(el) for el in get_by_class(html, "item")] == ["X", "Y", "Z"]

    def test_tag_and_attribute_names_case_insensitive(self) -> None:
        html = '<DIV CLASS="foo">text</DIV>'
        assert get_by_class(html, "foo", "div") == [html]
        assert get_by_class(html, "foo") == [html]

    def test_class_value_is_case_sensitive(self) -> None:
        assert get_by_class('<div class="foo">text</div>', "Foo") == []

    def test_word_boundaries_avoid_partial_tokens(self) -> None:
        html = '<div class="items">1</div><div class="item">2</div>'
        assert get_by_class(html, "item") == ['<div class="item">2</div>']

    def test_hyphenated_tokens_match_on_boundary(self) -> None:
        # Boundaries are regex word boundaries, not whitespace token splits.
        html = '<div class="flw-item">1</div>'
        assert get_by_class(html, "item") == [html]
        assert get_by_class(html, "flw-item") == [html]

    def test_nested_matches_are_both_returned(self) -> None:
        html = '<div class="box"><div class="box">in</div>out</div>'
        assert get_by_class(html, "box") == [html, '<div class="box">in</div>']

    def test_class_name_is_literal(self) -> None:
        html = '<div class="a+b">1</div><div class="aab">2</div>'
        assert get_by_class(html, "a.b") == []

    def test_unterminated_candidate_is_skipped(self) -> None:
        html = '<div class="x">never closed<span class="x">ok</span>'
        assert get_by_class(html, "x") == ['<span class="x">ok</span>']

    def test_lone_unterminated_element_yields_nothing(self) -> None:
        assert get_by_class('<div class="x">', "x") == []

    def test_errors_collect_skipped_candidates(self) -> None:
        html = 'ok\n  <div class="x">never closed\n<p class="x">fine</p>'
        errors: list[ParseError] = []
        assert get_by_class(html, "x", errors=errors) == ['<p class="x">fine</p>']
        assert errors == [ParseError("unterminated-element", line=2, column=3)]
        assert "</div>" in errors[0].message

    def test_invalid_tag_matches_nothing(self) -> None:
        assert get_by_class('<div class="x"></div>', "x", "d.v") == []

    def test_empty_class_matches_nothing(self) -> None:
        assert get_by_class('<div class="x"></div>', "") == []

    def test_single_quoted_class_not_matched(self) -> None:
        assert get_by_class("<div class='x'></div>", "x") == []


class TestGetByTag(unittest.TestCase):
    def test_all_elements_of_tag(self) -> None:
        html = "<ul><li>1</li><li>2</li></ul>"
        assert get_by_tag(html, "li") == ["<li>1</li>", "<li>2</li>"]

    def test_does_not_match_longer_tag_names(self) -> None:
        html = "<abbr>x</abbr><a>y</a>"
        assert get_by_tag(html, "a") == ["<a>y</a>"]

    def test_with_class_delegates_to_get_by_class(self) -> None:
        html = '<a class="link" href="/x">L</a><a href="/y">M</a>'
        assert get_by_tag(html, "a", "link") == ['<a class="link" href="/x">L</a>']

    def test_text_of_paragraphs_has_no_markup(self) -> None:
        html = "<p>One <b>bold</b></p><div><p>Two <i>it</i> <a href='#'>x</a></p></div>"
        for element in get_by_tag(html, "p"):
            text = get_text(element)
            assert "<" not in text
            assert ">" not in text

    def test_skips_void_elements(self) -> None:
        assert get_by_tag('<img src="a"><img src="b">', "img") == []

    def test_errors_for_each_skipped_candidate(self) -> None:
        errors: list[ParseError] = []
        assert get_by_tag("<img><img>", "img", errors=errors) == []
        assert [(e.line, e.column) for e in errors] == [(1, 1), (1, 6)]

    def test_invalid_tag(self) -> None:
        assert get_by_tag("<div></div>", "") == []


class TestGetElementById(unittest.TestCase):
    def test_nested_same_tag(self) -> None:
        html = '<div id="a"><div id="b">x</div>y</div>'
        result = get_element_by_id(html, "a")
        assert result == [html]
        assert '<div id="b">x</div>' in result[0]
        assert result[0].endswith("y</div>")

    def test_inner_id(self) -> None:
        html = '<div id="a"><div id="b">x</div>y</div>'
        assert get_element_by_id(html, "b") == ['<div id="b">x</div>']

    def test_missing_id(self) -> None:
        assert get_element_by_id('<div id="a"></div>', "z") == []

    def test_exact_value_only(self) -> None:
        html = '<div id="main-2">1</div><div id="Main">2</div>'
        assert get_element_by_id(html, "main") == []

    def test_only_first_duplicate_is_considered(self) -> None:
        html = '<p id="d">first</p><span id="d">second</span>'
        assert get_element_by_id(html, "d") == ['<p id="d">first</p>']

    def test_first_match_unresolvable_gives_empty(self) -> None:
        html = '<img id="d"><p id="d">later</p>'
        errors: list[ParseError] = []
        assert get_element_by_id(html, "d", errors=errors) == []
        assert len(errors) == 1

    def test_id_is_literal(self) -> None:
        assert get_element_by_id('<p id="a1">x</p>', "a.") == []

    def test_data_id_attribute_counts_as_id(self) -> None:
        # "\bid" also matches after the "-" in data-id.
        assert get_element_by_id('<a data-id="7">x</a>', "7") == ['<a data-id="7">x</a>']


class TestGetByDataAttr(unittest.TestCase):
    def test_finds_all_in_order(self) -> None:
        html = '<li data-id="1">a</li><li>b</li><div data-id="">c</div>'
        assert get_by_data_attr(html, "id") == ['<li data-id="1">a</li>', '<div data-id="">c</div>']

    def test_attribute_name_case_insensitive(self) -> None:
        html = '<div DATA-Role="x">y</div>'
        assert get_by_data_attr(html, "role") == [html]

    def test_other_data_attributes_ignored(self) -> None:
        assert get_by_data_attr('<div data-ids="1">x</div>', "id") == []

    def test_skips_unresolvable(self) -> None:
        html = '<img data-src="x.png"><picture data-src="y">p</picture>'
        assert get_by_data_attr(html, "src") == ['<picture data-src="y">p</picture>']

    def test_empty_name(self) -> None:
        assert get_by_data_attr('<div data-="1"></div>', "") == []
