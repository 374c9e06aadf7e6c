# ruff: noqa: E402
# tests/conftest.py
from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Ensure project root importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from siteid.fetch import Cancellation, FetchResult


class FakeFetcher:
    """
    In-memory stand-in for FetcherClient.

    `pages` maps a URL to either HTML (str/bytes) or an exception to raise.
    Unknown URLs raise KeyError so a test notices an unexpected fetch.
    Every requested URL is recorded in `calls`.
    """

    def __init__(self, pages: dict[str, str | bytes | Exception]) -> None:
        self.pages = pages
        self.calls: list[str] = []

    def fetch(self, url: str, cancel: Cancellation | None = None) -> FetchResult:
        self.calls.append(url)
        if cancel is not None:
            cancel.raise_if_cancelled(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        body = page.encode("utf-8") if isinstance(page, str) else page
        return FetchResult(
            status=200,
            url=url,
            effective_url=url,
            content_type="text/html; charset=utf-8",
            body=body,
        )


@pytest.fixture
def fake_fetcher() -> Callable[[dict[str, str | bytes | Exception]], FakeFetcher]:
    return FakeFetcher


def html_page(head: str = "", body: str = "") -> str:
    """Wrap head/body snippets in a minimal HTML document."""
    return (
        "<!DOCTYPE html>\n<html lang=\"en-US\">\n<head>\n<meta charset=\"UTF-8\">\n"
        f"{head}\n</head>\n<body>{body}</body>\n</html>"
    )
