# siteid/resolve/urls.py
from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from siteid.exceptions import ParseError


def root_url(link: str) -> str:
    """
    Reduce an absolute URL to its site root: scheme://host[:port].

    Path, query and fragment are all dropped, so the result is stable:
    root_url(root_url(x)) == root_url(x).

    Raises ParseError if `link` has no scheme or host, or doesn't parse.
    """
    s = (link or "").strip()
    try:
        parts = urlsplit(s)
        # .port validates the port number and raises ValueError if it is bogus
        _ = parts.port
    except ValueError as exc:
        raise ParseError(f"invalid URL {link!r}: {exc}") from exc

    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise ParseError(f"invalid URL {link!r}: expected an absolute URL like https://example.com")

    return urlunsplit((parts.scheme, parts.netloc, "", "", ""))


__all__ = ["root_url"]
