# siteid/extract/document.py
"""
HTML parse/query helpers over BeautifulSoup.

Selectors go through soupsieve (bundled with bs4), so CSS attribute flags
like `meta[name="author" i]` work. Queries are global over the parsed tree:
meta tags that leak out of a malformed <head> are still found.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from siteid.exceptions import ParseError

DEFAULT_PARSER = "html.parser"


def parse_document(body: bytes | str, *, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse raw HTML (bytes are charset-sniffed by bs4). Raises ParseError."""
    try:
        return BeautifulSoup(body, parser)
    except ParserRejectedMarkup as exc:
        raise ParseError(f"could not process document: {exc}") from exc


def first(doc: BeautifulSoup | Tag, selector: str) -> Tag | None:
    """First element matching `selector` in document order, or None."""
    return doc.select_one(selector)


def attr_or(tag: Tag, name: str, default: str = "") -> str:
    val = tag.get(name)
    if val is None:
        return default
    if isinstance(val, list):
        # multi-valued attributes (rel, class) come back as lists
        val = " ".join(val)
    return val.strip()


__all__ = ["DEFAULT_PARSER", "parse_document", "first", "attr_or"]
