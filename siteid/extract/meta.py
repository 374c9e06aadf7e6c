# siteid/extract/meta.py
"""
Meta/link tag extraction.

Per-field priority (first matching element wins, later duplicates ignored):

  homepage     link[rel=canonical]@href → meta[og:url]@content → page root
  owner        meta[og:site_name] → meta[name=organization i] → meta[name=author i]
  description  meta[name=description i] → meta[og:description]

An element that matches but lacks the attribute still claims the field;
homepage selectors then fall back to the page root, the others to "".
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup

from siteid.info import InfoBuilder

from .document import attr_or, first
from .pipeline import PageContext, Step, run_steps


@dataclass(frozen=True, slots=True)
class Selector:
    css: str
    attr: str
    page_default: bool = False  # default to the page root instead of ""

    def __call__(self, ctx: PageContext) -> str | None:
        tag = first(ctx.doc, self.css)
        if tag is None:
            return None
        return attr_or(tag, self.attr, ctx.page_url if self.page_default else "")


HOMEPAGE_SELECTORS: tuple[Selector, ...] = (
    Selector('link[rel="canonical"]', "href", page_default=True),
    Selector('meta[property="og:url"]', "content", page_default=True),
)

OWNER_SELECTORS: tuple[Selector, ...] = (
    Selector('meta[property="og:site_name"]', "content"),
    Selector('meta[name="organization" i]', "content"),
    Selector('meta[name="author" i]', "content"),
)

DESCRIPTION_SELECTORS: tuple[Selector, ...] = (
    Selector('meta[name="description" i]', "content"),
    Selector('meta[property="og:description"]', "content"),
)


def _page_root(ctx: PageContext) -> str:
    return ctx.page_url


META_STEPS: tuple[Step, ...] = (
    *(Step("homepage", s, s.css) for s in HOMEPAGE_SELECTORS),
    Step("homepage", _page_root, "page root"),
    *(Step("owner", s, s.css) for s in OWNER_SELECTORS),
    *(Step("description", s, s.css) for s in DESCRIPTION_SELECTORS),
)


def extract_meta(doc: BeautifulSoup, page_url: str, builder: InfoBuilder) -> InfoBuilder:
    """Fill whatever is still open in `builder` from meta/link tags."""
    return run_steps(META_STEPS, PageContext(doc, page_url), builder)


__all__ = [
    "Selector",
    "HOMEPAGE_SELECTORS",
    "OWNER_SELECTORS",
    "DESCRIPTION_SELECTORS",
    "META_STEPS",
    "extract_meta",
]
