# tests/test_cli.py
import json
import logging

import pytest

from siteid.cli import main
from siteid.fetch import Cancellation
from siteid.exceptions import FetchError, ResolveError
from siteid.info import Info
from siteid.resolve import MockResolver

INFO = Info(owner="Acme", homepage="https://www.acme.test/", description="Anvils and more.")


def test_website_by_domain_prints_labelled_fields(capsys):
    r = MockResolver(INFO)

    rc = main(["website", "--domain", "acme.test"], resolver=r)

    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out == [
        "      Owner: Acme",
        "   Homepage: https://www.acme.test/",
        "Description: Anvils and more.",
    ]
    assert r.calls == [("domain", "acme.test")]


def test_ws_alias_by_url_with_json(capsys):
    r = MockResolver(INFO)

    rc = main(["ws", "--url", "https://acme.test/about", "--json"], resolver=r)

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == INFO.as_dict()
    assert r.calls == [("website", "https://acme.test/about")]


def test_resolve_error_lists_each_candidate(capsys):
    err = ResolveError(
        "acme.test",
        [
            FetchError("unexpected response status: 404 Not Found", kind=FetchError.STATUS),
            FetchError("could not fetch website: refused", kind=FetchError.TRANSPORT),
        ],
    )

    rc = main(["website", "--domain", "acme.test"], resolver=MockResolver(error=err))

    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert captured.err.splitlines() == [
        "error: could not resolve identity for domain",
        "  - unexpected response status: 404 Not Found",
        "  - could not fetch website: refused",
    ]


@pytest.mark.parametrize(
    "argv",
    [
        ["website"],
        ["website", "--url", "https://a.test", "--domain", "a.test"],
        [],
    ],
)
def test_usage_errors_exit_2(argv):
    with pytest.raises(SystemExit) as ei:
        main(argv, resolver=MockResolver(INFO))
    assert ei.value.code == 2


@pytest.mark.parametrize(
    "argv",
    [
        ["-v", "website", "--domain", "acme.test"],
        ["website", "--domain", "acme.test", "-v"],
        ["ws", "--verbose", "--domain", "acme.test"],
    ],
)
def test_verbose_flag_before_or_after_subcommand(argv, capsys):
    logging.getLogger("siteid").setLevel(logging.WARNING)

    rc = main(argv, resolver=MockResolver(INFO))

    assert rc == 0
    assert logging.getLogger("siteid").level == logging.DEBUG


class _RecordingResolver(MockResolver):
    def __init__(self, info: Info) -> None:
        super().__init__(info)
        self.cancels: list[Cancellation | None] = []

    def identify_domain(self, domain, cancel=None):
        self.cancels.append(cancel)
        return super().identify_domain(domain, cancel)


def test_zero_timeout_is_an_expired_deadline_not_no_deadline():
    r = _RecordingResolver(INFO)

    main(["website", "--domain", "acme.test", "--timeout", "0"], resolver=r)

    (cancel,) = r.cancels
    assert isinstance(cancel, Cancellation)
    assert cancel.cancelled


def test_no_timeout_passes_no_token():
    r = _RecordingResolver(INFO)

    main(["website", "--domain", "acme.test"], resolver=r)

    assert r.cancels == [None]
