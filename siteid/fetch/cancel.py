# siteid/fetch/cancel.py
from __future__ import annotations

import threading
import time

from siteid.exceptions import FetchError


class Cancellation:
    """
    Cancellation token with an optional deadline.

    The hosting application keeps a reference and calls cancel() from any
    thread; the fetcher checks the token before the request, polls it while the
    request is in flight, checks it between body chunks, and shortens its
    socket timeouts to whatever time is left before the deadline.

        token = Cancellation.with_timeout(5.0)
        info = resolver.identify_domain("example.com", cancel=token)
    """

    def __init__(self, deadline: float | None = None) -> None:
        # deadline is on the time.monotonic() clock
        self._event = threading.Event()
        self.deadline = deadline

    @classmethod
    def with_timeout(cls, seconds: float) -> Cancellation:
        return cls(deadline=time.monotonic() + float(seconds))

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self.deadline is not None and time.monotonic() >= self.deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, None when there is no deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def raise_if_cancelled(self, url: str | None = None) -> None:
        if not self.cancelled:
            return
        reason = "cancelled" if self._event.is_set() else "deadline exceeded"
        raise FetchError(f"request {reason}", kind=FetchError.CANCELLED, url=url)


__all__ = ["Cancellation"]
