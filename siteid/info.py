# siteid/info.py
"""
Result record for a resolved website.

Info is immutable; the field resolver assembles values in an InfoBuilder and
freezes them once at the end.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

FIELDS = ("owner", "homepage", "description")


@dataclass(frozen=True, slots=True)
class Info:
    owner: str = ""  # best guess at the organization behind the site
    homepage: str = ""  # canonical absolute URL
    description: str = ""  # short summary of the site and/or its owner

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class InfoBuilder:
    """
    Mutable accumulator used while resolving a single page.

    A field counts as decided once any source has claimed it, even with an
    empty value, so lower-priority sources never get a say afterwards.
    """

    values: dict[str, str] = field(default_factory=lambda: dict.fromkeys(FIELDS, ""))
    decided: set[str] = field(default_factory=set)

    def is_open(self, name: str) -> bool:
        return name not in self.decided and not self.values[name]

    def set_if_empty(self, name: str, value: str) -> bool:
        """Fill `name` unless a higher-priority source already did. Returns True if set."""
        if name not in self.values:
            raise KeyError(name)
        if not self.is_open(name):
            return False
        self.values[name] = value or ""
        self.decided.add(name)
        return True

    def build(self) -> Info:
        return Info(**self.values)


__all__ = ["FIELDS", "Info", "InfoBuilder"]
