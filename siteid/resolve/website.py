# siteid/resolve/website.py
"""
Website and domain identity resolution.

  identify_website(link)
      root_url(link) → fetch → parse → resolve_fields → Info

  identify_domain(domain)
      for host in options_for_domain(domain):
          identify_website("https://" + host)   # first success wins

There is no process-wide default instance: build one with new_resolver() at
startup and pass it to whoever needs it.
"""

from __future__ import annotations

import logging
from typing import Protocol

from siteid.config import AppConfig, load_settings
from siteid.exceptions import FetchError, IdentifyError, ResolveError
from siteid.extract import parse_document, resolve_fields
from siteid.fetch import Cancellation, FetcherClient, FetchResult
from siteid.info import Info

from .candidates import options_for_domain
from .urls import root_url

log = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch(self, url: str, cancel: Cancellation | None = None) -> FetchResult: ...


class IdentityResolver(Protocol):
    def identify_domain(self, domain: str, cancel: Cancellation | None = None) -> Info: ...

    def identify_website(self, link: str, cancel: Cancellation | None = None) -> Info: ...


class Resolver:
    """
    The standard resolver.

    Holds nothing but its fetcher (and the fetcher's connection pool), so one
    instance can serve concurrent callers.
    """

    def __init__(self, fetcher: Fetcher, *, owns_fetcher: bool = False) -> None:
        self.fetcher = fetcher
        self._owns_fetcher = owns_fetcher

    def identify_domain(self, domain: str, cancel: Cancellation | None = None) -> Info:
        """
        Infer details about a website from its domain name.

        Candidates are tried one at a time, most specific first. Raises
        ResolveError carrying every per-candidate error when none works.
        Cancellation stops the loop and is re-raised as-is.
        """
        errs: list[IdentifyError] = []
        for opt in options_for_domain(domain):
            try:
                info = self.identify_website(f"https://{opt}", cancel)
            except FetchError as exc:
                if exc.cancelled:
                    raise
                log.debug("candidate %s failed: %s", opt, exc)
                errs.append(exc)
            except IdentifyError as exc:
                log.debug("candidate %s failed: %s", opt, exc)
                errs.append(exc)
            else:
                log.info("resolved domain %s via %s", domain, opt)
                return info

        raise ResolveError(domain, errs)

    def identify_website(self, link: str, cancel: Cancellation | None = None) -> Info:
        """Infer details about the website serving `link` (only its root is fetched)."""
        link = root_url(link)
        res = self.fetcher.fetch(link, cancel)
        doc = parse_document(res.body)
        return resolve_fields(doc, link)

    # ----------------------------------------------------------------------------------
    # Context manager
    # ----------------------------------------------------------------------------------

    def close(self) -> None:
        if self._owns_fetcher:
            close = getattr(self.fetcher, "close", None)
            if close is not None:
                close()

    def __enter__(self) -> Resolver:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def new_resolver(config: AppConfig | None = None, fetcher: Fetcher | None = None) -> Resolver:
    """
    Build a resolver. When no fetcher is given, an httpx-backed FetcherClient
    is created from `config` (or the environment) and closed with the resolver.
    """
    if fetcher is not None:
        return Resolver(fetcher)
    cfg = config or load_settings()
    return Resolver(FetcherClient(config=cfg.fetch), owns_fetcher=True)


# --- convenience wrappers -----------------------------------------------------


def identify_domain(
    domain: str, resolver: IdentityResolver, cancel: Cancellation | None = None
) -> Info:
    return resolver.identify_domain(domain, cancel)


def identify_website(
    link: str, resolver: IdentityResolver, cancel: Cancellation | None = None
) -> Info:
    return resolver.identify_website(link, cancel)


__all__ = [
    "Fetcher",
    "IdentityResolver",
    "Resolver",
    "new_resolver",
    "identify_domain",
    "identify_website",
]
