# siteid/resolve/__init__.py
from __future__ import annotations

from .candidates import options_for_domain
from .mock import MockResolver
from .urls import root_url
from .website import (
    Fetcher,
    IdentityResolver,
    Resolver,
    identify_domain,
    identify_website,
    new_resolver,
)

"""
Resolve package

  - `candidates` expands a domain into hosts worth trying.
  - `urls` reduces a URL to its site root.
  - `website` ties fetch + extract together for a URL or a domain.
  - `mock` is a canned resolver for tests.
"""

__all__ = [
    "options_for_domain",
    "root_url",
    "Fetcher",
    "IdentityResolver",
    "Resolver",
    "new_resolver",
    "identify_domain",
    "identify_website",
    "MockResolver",
]
