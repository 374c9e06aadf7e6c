# siteid/extract/fields.py
from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup

from siteid.info import Info, InfoBuilder

from .meta import META_STEPS
from .pipeline import PageContext, Step, run_steps


def _jsonld_owner(ctx: PageContext) -> str | None:
    ld = ctx.jsonld
    return (ld.owner or None) if ld is not None else None


def _jsonld_description(ctx: PageContext) -> str | None:
    ld = ctx.jsonld
    return (ld.description or None) if ld is not None else None


# Structured data is the strongest signal, so it goes first. It carries no
# URL, so homepage always comes from meta tags or the page root.
JSONLD_STEPS: tuple[Step, ...] = (
    Step("owner", _jsonld_owner, "json-ld name/legalName"),
    Step("description", _jsonld_description, "json-ld description"),
)

DEFAULT_STEPS: tuple[Step, ...] = JSONLD_STEPS + META_STEPS


def resolve_fields(
    doc: BeautifulSoup,
    page_url: str,
    steps: Sequence[Step] = DEFAULT_STEPS,
) -> Info:
    """
    Run every step against one page and freeze the result.

    Never raises: undecodable JSON-LD is logged and skipped, and homepage
    always resolves (to the page root at worst).
    """
    builder = run_steps(steps, PageContext(doc, page_url), InfoBuilder())
    return builder.build()


__all__ = ["JSONLD_STEPS", "DEFAULT_STEPS", "resolve_fields"]
