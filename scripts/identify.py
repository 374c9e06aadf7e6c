#!/usr/bin/env python3
# scripts/identify.py
"""
Batch identify a list of domains and emit one JSON line per domain.

Usage:

  python scripts/identify.py example.com email.google.com
  python scripts/identify.py --file domains.txt --timeout 15 > out.jsonl

Notes:
- Works from repo root without installing the package (adds project root to sys.path).
- Blank lines and lines starting with '#' in --file are skipped.
- Domains are resolved sequentially through one shared resolver.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# --- make siteid importable when running from repo root --------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from siteid import Cancellation, IdentifyError, ResolveError, new_resolver  # noqa: E402
from siteid.logging_setup import configure_logging  # noqa: E402


def _read_domains(args: argparse.Namespace) -> list[str]:
    out = list(args.domains or [])
    if args.file:
        for line in Path(args.file).read_text(encoding="utf-8").splitlines():
            s = line.strip()
            if s and not s.startswith("#"):
                out.append(s)
    return out


def _record(domain: str, resolver, timeout: float | None) -> dict:
    cancel = Cancellation.with_timeout(timeout) if timeout is not None else None
    try:
        info = resolver.identify_domain(domain, cancel)
    except ResolveError as err:
        return {
            "domain": domain,
            "ok": False,
            "error": str(err),
            "errors": [str(e) for e in err.errors],
        }
    except IdentifyError as err:
        return {"domain": domain, "ok": False, "error": str(err), "errors": []}
    return {"domain": domain, "ok": True, **info.as_dict()}


def main() -> int:
    ap = argparse.ArgumentParser(description="Identify owner/homepage/description for many domains.")
    ap.add_argument("domains", nargs="*", help="Domains to identify")
    ap.add_argument("-f", "--file", help="Read domains from a file, one per line")
    ap.add_argument("--timeout", type=float, default=None, help="Per-domain deadline in seconds")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    args = ap.parse_args()

    configure_logging("DEBUG" if args.verbose else None)

    domains = _read_domains(args)
    if not domains:
        ap.error("no domains given")

    failed = 0
    with new_resolver() as resolver:
        for domain in domains:
            rec = _record(domain, resolver, args.timeout)
            failed += 0 if rec["ok"] else 1
            print(json.dumps(rec, ensure_ascii=False), flush=True)

    print(f"RESULT total={len(domains)} failed={failed}", file=sys.stderr)
    return 1 if failed == len(domains) else 0


if __name__ == "__main__":
    raise SystemExit(main())
