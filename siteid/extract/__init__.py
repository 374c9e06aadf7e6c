# siteid/extract/__init__.py
from __future__ import annotations

from .document import attr_or, first, parse_document
from .fields import DEFAULT_STEPS, JSONLD_STEPS, resolve_fields
from .jsonld import JsonLD, extract_jsonld, parse_jsonld
from .meta import META_STEPS, Selector, extract_meta
from .pipeline import PageContext, Step, run_steps

"""
Extract package

Turns a parsed page into an Info:
  - `jsonld`  structured data (first application/ld+json script)
  - `meta`    meta/link tag fallbacks
  - `fields`  the ordered step list combining both
"""

__all__ = [
    "parse_document",
    "first",
    "attr_or",
    "JsonLD",
    "parse_jsonld",
    "extract_jsonld",
    "Selector",
    "META_STEPS",
    "extract_meta",
    "PageContext",
    "Step",
    "run_steps",
    "JSONLD_STEPS",
    "DEFAULT_STEPS",
    "resolve_fields",
]
