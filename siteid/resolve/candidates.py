# siteid/resolve/candidates.py
from __future__ import annotations

from siteid.exceptions import ParseError


def _clean_domain(domain: str) -> str:
    s = (domain or "").strip()
    # Remove trailing dot (rooted FQDN)
    if s.endswith("."):
        s = s[:-1]
    if not s:
        raise ParseError(f"empty domain: {domain!r}")
    return s


def options_for_domain(domain: str) -> list[str]:
    """
    Expand a domain into the hosts most likely to serve its public site,
    most specific first.

      email.google.com -> [email.google.com, google.com, www.google.com]

    Leading labels are stripped one at a time until a two-label name is left,
    then "www." + that name is added. No public-suffix awareness: the
    expansion is purely about dots.
    """
    domain = _clean_domain(domain)
    seen = {domain}
    opts = [domain]

    # add options by removing leading labels
    while domain.count(".") > 1:
        domain = domain.split(".", 1)[1]
        if domain not in seen:
            seen.add(domain)
            opts.append(domain)

    # add the conventional www host for whatever is left
    alt = f"www.{domain}"
    if alt not in seen:
        seen.add(alt)
        opts.append(alt)

    return opts


__all__ = ["options_for_domain"]
