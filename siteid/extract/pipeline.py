# siteid/extract/pipeline.py
"""
Ordered "try to fill this field" steps over an InfoBuilder.

A step's source returns:
  - None  → nothing found here; the field stays open for the next step
  - str   → this source claims the field (even if the string is empty)

Steps for a field whose value is already decided are skipped, so earlier
steps always win.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cached_property

from bs4 import BeautifulSoup

from siteid.exceptions import ExtractionError
from siteid.info import InfoBuilder

from .jsonld import JsonLD, extract_jsonld

log = logging.getLogger(__name__)


class PageContext:
    """Everything a step may look at for one fetched page."""

    def __init__(self, doc: BeautifulSoup, page_url: str) -> None:
        self.doc = doc
        self.page_url = page_url

    @cached_property
    def jsonld(self) -> JsonLD | None:
        # decoded at most once per page, shared by every JSON-LD step
        try:
            return extract_jsonld(self.doc)
        except ExtractionError as exc:
            log.debug("Could not extract JSON-LD data from %s: %s", self.page_url, exc)
            return None


@dataclass(frozen=True, slots=True)
class Step:
    field: str
    source: Callable[[PageContext], str | None]
    name: str = ""


def run_steps(steps: Iterable[Step], ctx: PageContext, builder: InfoBuilder) -> InfoBuilder:
    for step in steps:
        if not builder.is_open(step.field):
            continue
        value = step.source(ctx)
        if value is None:
            continue
        builder.set_if_empty(step.field, value)
        log.debug("%s <- %s (%r)", step.field, step.name or "step", value)
    return builder


__all__ = ["PageContext", "Step", "run_steps"]
