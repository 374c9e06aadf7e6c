# siteid/__init__.py
"""
siteid: infer who runs a website (owner, homepage, description) from its
domain or URL.

    from siteid import Cancellation, new_resolver

    with new_resolver() as r:
        info = r.identify_domain("email.example.com", cancel=Cancellation.with_timeout(10))
        print(info.owner, info.homepage, info.description)
"""

from __future__ import annotations

from .exceptions import (
    ExtractionError,
    FetchError,
    IdentifyError,
    ParseError,
    ResolveError,
)
from .fetch import Cancellation, FetcherClient, FetchResult
from .info import Info
from .resolve import (
    IdentityResolver,
    MockResolver,
    Resolver,
    identify_domain,
    identify_website,
    new_resolver,
    options_for_domain,
    root_url,
)

__version__ = "0.1.0"

__all__ = [
    "Info",
    "Cancellation",
    "FetcherClient",
    "FetchResult",
    "IdentityResolver",
    "Resolver",
    "MockResolver",
    "new_resolver",
    "identify_domain",
    "identify_website",
    "options_for_domain",
    "root_url",
    "IdentifyError",
    "ParseError",
    "FetchError",
    "ResolveError",
    "ExtractionError",
]
