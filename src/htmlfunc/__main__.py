#!/usr/bin/env python3
"""Command-line interface for htmlfunc."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from . import HtmlFunc, get_attr, get_text, inner_html


def _get_version() -> str:
    try:
        return version("htmlfunc")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="htmlfunc",
        description="Extract elements, attributes or text from HTML without building a tree.",
        epilog=(
            "Examples:\n"
            "  htmlfunc page.html --selector '.flw-item' --format text\n"
            "  curl -s https://example.com | htmlfunc - --selector a --attr href\n"
            "  htmlfunc page.html --selector '#main' --format inner\n"
            "\n"
            "Supported selectors: tag, .class, #id, tag.class, tag#id.\n"
            "If you don't have the 'htmlfunc' command available, use:\n"
            "  python -m htmlfunc ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="HTML file to read, or '-' to read from stdin",
    )
    parser.add_argument(
        "--selector",
        help="Selector for choosing elements (defaults to the whole document)",
    )
    parser.add_argument(
        "--format",
        choices=["html", "text", "inner"],
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--attr",
        metavar="NAME",
        help="Print this attribute of each element instead of the element",
    )
    parser.add_argument(
        "--first",
        action="store_true",
        help="Only output the first matching element",
    )
    parser.add_argument(
        "--show-errors",
        action="store_true",
        help="Report elements skipped because they have no closing tag",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"htmlfunc {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_html(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    return Path(path).read_text(encoding="utf-8", errors="replace")


def _render(element: str, output_format: str) -> str:
    if output_format == "text":
        return get_text(element)
    if output_format == "inner":
        return inner_html(element)
    return element


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    doc = HtmlFunc(_read_html(args.path), collect_errors=args.show_errors)

    elements = doc.query_selector_all(args.selector) if args.selector else [doc.html]

    if args.show_errors:
        for error in doc.errors:
            print(str(error), file=sys.stderr)

    if not elements:
        raise SystemExit(1)

    if args.first:
        elements = elements[:1]

    if args.attr:
        values = [value for value in (get_attr(el, args.attr) for el in elements) if value is not None]
        if not values:
            raise SystemExit(1)
        sys.stdout.write("\n".join(values))
        sys.stdout.write("\n")
        return

    outputs = [_render(element, args.format) for element in elements]
    sys.stdout.write("\n".join(outputs))
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
