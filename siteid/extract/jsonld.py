# siteid/extract/jsonld.py
"""
Structured data (JSON-LD) extraction.

Only the first <script type="application/ld+json"> on the page is read, and
only three keys matter: name, legalName, description. Anything else in the
blob is ignored.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from bs4 import BeautifulSoup

from siteid.exceptions import ExtractionError

from .document import first

LD_JSON_SELECTOR = 'script[type="application/ld+json"]'

# JSON key -> JsonLD attribute
_KEYS = {
    "name": "name",
    "legalName": "legal_name",
    "description": "description",
}


@dataclass(frozen=True, slots=True)
class JsonLD:
    name: str = ""
    legal_name: str = ""
    description: str = ""

    @property
    def owner(self) -> str:
        return self.name or self.legal_name


def parse_jsonld(text: str) -> JsonLD:
    """
    Decode a JSON-LD blob into the three recognized fields.

    Raises ExtractionError on malformed JSON, a non-object top level, or a
    recognized key holding something other than a string (null reads as "").
    """
    try:
        data = json.loads(text.strip())
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"malformed JSON-LD: {exc}") from exc

    if not isinstance(data, dict):
        raise ExtractionError(f"JSON-LD top level is {type(data).__name__}, expected object")

    out: dict[str, str] = {}
    for key, attr in _KEYS.items():
        val = data.get(key)
        if val is None:
            continue
        if not isinstance(val, str):
            raise ExtractionError(f"JSON-LD field {key!r} is {type(val).__name__}, expected string")
        out[attr] = val
    return JsonLD(**out)


def extract_jsonld(doc: BeautifulSoup) -> JsonLD | None:
    """JsonLD for the first linked-data script, None if the page has none."""
    tag = first(doc, LD_JSON_SELECTOR)
    if tag is None:
        return None
    return parse_jsonld(tag.string or "")


__all__ = ["LD_JSON_SELECTOR", "JsonLD", "parse_jsonld", "extract_jsonld"]
