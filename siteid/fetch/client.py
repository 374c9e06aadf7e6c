# siteid/fetch/client.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import httpx

from siteid.config import FetchConfig, load_settings
from siteid.exceptions import FetchError, ParseError

from .cancel import Cancellation

log = logging.getLogger(__name__)

# How often a caller blocked on an in-flight request re-checks its token
CANCEL_POLL_S = 0.05
# Requests abandoned on cancellation keep a worker busy until httpx times them out
FETCH_WORKERS = 4

# --------------------------------------------------------------------------------------------------
# Results
# --------------------------------------------------------------------------------------------------


@dataclass
class FetchResult:
    status: int
    url: str
    effective_url: str
    content_type: str | None
    body: bytes
    truncated: bool = False


# --------------------------------------------------------------------------------------------------
# Client
# --------------------------------------------------------------------------------------------------


class FetcherClient:
    """
    Small wrapper around httpx that performs the single GET the resolver needs.

    Flow:
      1) cancellation check (token fired or deadline passed → cancelled)
      2) GET with redirects followed, timeouts capped by the token's deadline
      3) non-200 final status → FetchError(kind="status")
      4) body streamed in chunks, re-checking the token, capped at max_body_bytes
      5) zero-length body → FetchError(kind="empty")

    Transport failures (DNS, connect, TLS, timeouts, redirect loops) surface
    as FetchError(kind="transport") unless the token fired meanwhile.

    With a token, the request runs on a small worker pool and the caller polls
    the token, so cancel() returns control within CANCEL_POLL_S even while the
    socket is still blocked.
    """

    def __init__(
        self,
        *,
        config: FetchConfig | None = None,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or load_settings().fetch
        self.user_agent = user_agent or self.config.user_agent

        self._client = httpx.Client(
            headers={"User-Agent": self.user_agent, "Accept": self.config.accept},
            timeout=self._timeout(None),
            follow_redirects=True,
            max_redirects=self.config.max_redirects,
            transport=transport,
        )
        self._pool = ThreadPoolExecutor(
            max_workers=FETCH_WORKERS, thread_name_prefix="siteid-fetch"
        )

    # ---- core fetch ------------------------------------------------------------------

    def fetch(self, url: str, cancel: Cancellation | None = None) -> FetchResult:
        if cancel is None:
            return self._fetch(url, None)

        cancel.raise_if_cancelled(url)
        # Run the blocking request on a worker so the caller can walk away the
        # moment the token fires, even mid-connect or mid-read.
        fut = self._pool.submit(self._fetch, url, cancel)
        while True:
            try:
                return fut.result(timeout=CANCEL_POLL_S)
            except TimeoutError:
                if cancel.cancelled:
                    fut.cancel()
                    log.debug("abandoning in-flight fetch of %s", url)
                    cancel.raise_if_cancelled(url)

    def _fetch(self, url: str, cancel: Cancellation | None) -> FetchResult:
        try:
            with self._client.stream("GET", url, timeout=self._timeout(cancel)) as resp:
                status = int(resp.status_code)
                if status != httpx.codes.OK:
                    raise FetchError(
                        f"unexpected response status: {status} {resp.reason_phrase}".rstrip(),
                        kind=FetchError.STATUS,
                        url=url,
                        status=status,
                    )
                body, truncated = self._read_capped(resp, url, cancel)
                result = FetchResult(
                    status=status,
                    url=url,
                    effective_url=str(resp.url),
                    content_type=resp.headers.get("Content-Type"),
                    body=body,
                    truncated=truncated,
                )
        except httpx.InvalidURL as exc:
            raise ParseError(f"invalid URL {url!r}: {exc}") from exc
        except httpx.RequestError as exc:
            if cancel is not None and cancel.cancelled:
                raise FetchError(
                    "request cancelled", kind=FetchError.CANCELLED, url=url
                ) from exc
            raise FetchError(
                f"could not fetch website: {exc}", kind=FetchError.TRANSPORT, url=url
            ) from exc

        if not result.body:
            raise FetchError("no content returned", kind=FetchError.EMPTY, url=url, status=status)

        log.debug(
            "fetched %s -> %s status=%d bytes=%d truncated=%s",
            url,
            result.effective_url,
            result.status,
            len(result.body),
            result.truncated,
        )
        return result

    # ----------------------------------------------------------------------------------
    # Internals
    # ----------------------------------------------------------------------------------

    def _timeout(self, cancel: Cancellation | None) -> httpx.Timeout:
        read_s = self.config.read_timeout_s
        connect_s = self.config.connect_timeout_s
        remaining = cancel.remaining() if cancel is not None else None
        if remaining is not None:
            read_s = min(read_s, remaining)
            connect_s = min(connect_s, remaining)
        return httpx.Timeout(read_s, connect=connect_s)

    def _read_capped(
        self, resp: httpx.Response, url: str, cancel: Cancellation | None
    ) -> tuple[bytes, bool]:
        cap = self.config.max_body_bytes
        buf = bytearray()
        for chunk in resp.iter_bytes():
            if cancel is not None:
                cancel.raise_if_cancelled(url)
            buf.extend(chunk)
            if len(buf) >= cap:
                return bytes(buf[:cap]), len(buf) > cap
        return bytes(buf), False

    # ----------------------------------------------------------------------------------
    # Context manager
    # ----------------------------------------------------------------------------------

    def close(self) -> None:
        self._pool.shutdown(wait=False, cancel_futures=True)
        self._client.close()

    def __enter__(self) -> FetcherClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = [
    "FetcherClient",
    "FetchResult",
]
