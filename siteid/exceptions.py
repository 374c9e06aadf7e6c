# siteid/exceptions.py
"""
Exception classes shared across the resolver, fetcher and extractors.

Everything a caller can see derives from IdentifyError, so
`except IdentifyError` is enough to handle any failed resolution.
"""

from __future__ import annotations


class IdentifyError(Exception):
    """Base class for all siteid errors."""


class ParseError(IdentifyError):
    """
    Raised when input cannot be interpreted.

    Examples:
        - URL without a scheme or host
        - Empty domain
        - HTML body that cannot be decoded into a document
    """


class FetchError(IdentifyError):
    """
    Raised when the site root could not be retrieved.

    `kind` tells the failures apart:
        - "transport": connection, DNS, TLS or timeout failure
        - "status":    final response status was not 200
        - "empty":     200 with no body
        - "cancelled": the caller's cancellation token fired or its deadline passed
    """

    TRANSPORT = "transport"
    STATUS = "status"
    EMPTY = "empty"
    CANCELLED = "cancelled"

    def __init__(
        self,
        message: str,
        *,
        kind: str,
        url: str | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.url = url
        self.status = status

    @property
    def cancelled(self) -> bool:
        return self.kind == self.CANCELLED


class ResolveError(IdentifyError):
    """
    Raised by identify_domain when every candidate host failed.

    The message is fixed; the per-candidate failures are kept in `errors`
    in the order the candidates were attempted.
    """

    MESSAGE = "could not resolve identity for domain"

    def __init__(self, domain: str, errors: list[IdentifyError]) -> None:
        super().__init__(self.MESSAGE)
        self.domain = domain
        self.errors = list(errors)


class ExtractionError(IdentifyError):
    """
    Structured data on the page could not be decoded.

    Never surfaced to callers; the field resolver logs it and falls back to
    meta tags.
    """


__all__ = [
    "IdentifyError",
    "ParseError",
    "FetchError",
    "ResolveError",
    "ExtractionError",
]
