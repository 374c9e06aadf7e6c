# siteid/resolve/mock.py
from __future__ import annotations

from siteid.fetch import Cancellation
from siteid.info import Info


class MockResolver:
    """
    Stand-in for Resolver in callers' tests: returns `info` from both
    operations, or raises `error` when one is given. Records every call.
    """

    def __init__(self, info: Info | None = None, error: Exception | None = None) -> None:
        self.info = info if info is not None else Info()
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def _result(self) -> Info:
        if self.error is not None:
            raise self.error
        return self.info

    def identify_domain(self, domain: str, cancel: Cancellation | None = None) -> Info:
        self.calls.append(("domain", domain))
        return self._result()

    def identify_website(self, link: str, cancel: Cancellation | None = None) -> Info:
        self.calls.append(("website", link))
        return self._result()


__all__ = ["MockResolver"]
