# siteid/fetch/__init__.py
"""
Tiny fetcher package: an httpx client for the single page a resolution needs,
plus the cancellation token the caller threads through it.

Public entry points:
  - FetcherClient, FetchResult
  - Cancellation
"""

from .cancel import Cancellation
from .client import (
    FetcherClient,
    FetchResult,
)

__all__ = [
    "Cancellation",
    "FetcherClient",
    "FetchResult",
]
