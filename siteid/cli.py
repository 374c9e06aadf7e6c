# siteid/cli.py
from __future__ import annotations

import argparse
import json
import sys

from siteid.exceptions import IdentifyError, ResolveError
from siteid.fetch import Cancellation
from siteid.info import Info
from siteid.logging_setup import configure_logging
from siteid.resolve import IdentityResolver, new_resolver


def _print_info(info: Info) -> None:
    # Labels are right-aligned; the exact format is asserted in tests.
    print("      Owner:", info.owner)
    print("   Homepage:", info.homepage)
    print("Description:", info.description)


def _print_error(err: IdentifyError) -> None:
    print(f"error: {err}", file=sys.stderr)
    if isinstance(err, ResolveError):
        for sub in err.errors:
            print(f"  - {sub}", file=sys.stderr)


def _cmd_website(args: argparse.Namespace, resolver: IdentityResolver) -> int:
    cancel = Cancellation.with_timeout(args.timeout) if args.timeout is not None else None
    try:
        if args.url:
            info = resolver.identify_website(args.url, cancel)
        else:
            info = resolver.identify_domain(args.domain, cancel)
    except IdentifyError as err:
        _print_error(err)
        return 1

    if args.json:
        print(json.dumps(info.as_dict(), ensure_ascii=False))
    else:
        _print_info(info)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="siteid", description="Identify metadata for things.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    ws = sub.add_parser("website", aliases=["ws"], help="Identify metadata for a website")
    target = ws.add_mutually_exclusive_group(required=True)
    target.add_argument("--url", help="The URL to identify, e.g. https://example.com/about")
    target.add_argument("--domain", help="The domain to identify, e.g. email.example.com")
    ws.add_argument("--json", action="store_true", help="Print the result as a JSON object")
    # also accepted after the subcommand; SUPPRESS keeps a top-level -v from being reset
    ws.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Debug logging to stderr",
    )
    ws.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Overall deadline in seconds (default: no deadline beyond fetch timeouts)",
    )
    ws.set_defaults(func=_cmd_website)
    return ap


def main(argv: list[str] | None = None, resolver: IdentityResolver | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    if resolver is not None:
        return args.func(args, resolver)
    with new_resolver() as r:
        return args.func(args, r)


if __name__ == "__main__":
    raise SystemExit(main())
