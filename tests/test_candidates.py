# tests/test_candidates.py
import pytest

from siteid.exceptions import ParseError
from siteid.resolve.candidates import options_for_domain


@pytest.mark.parametrize(
    "domain, expected",
    [
        # TLD (this isn't really valid, but...)
        ("google", ["google", "www.google"]),
        ("google.com", ["google.com", "www.google.com"]),
        ("email.google.com", ["email.google.com", "google.com", "www.google.com"]),
        (
            "x1.y2.email.google.com",
            [
                "x1.y2.email.google.com",
                "y2.email.google.com",
                "email.google.com",
                "google.com",
                "www.google.com",
            ],
        ),
    ],
)
def test_options_for_domain_examples(domain, expected):
    assert options_for_domain(domain) == expected


@pytest.mark.parametrize(
    "domain",
    ["a.b", "a.b.c", "mail.eu.corp.example.org", "1.2.3.4.5.6.example.com"],
)
def test_one_candidate_per_label_stripping_one_label_each_time(domain):
    opts = options_for_domain(domain)
    labels = domain.split(".")

    assert len(opts) == len(labels)
    for i, opt in enumerate(opts[:-1]):
        assert opt == ".".join(labels[i:])
    assert opts[-1] == "www." + ".".join(labels[-2:])


def test_www_input_is_not_repeated():
    # the www variant of the reduced domain is the input itself
    assert options_for_domain("www.example.com") == ["www.example.com", "example.com"]


def test_candidates_are_unique():
    opts = options_for_domain("www.www.example.com")
    assert len(opts) == len(set(opts))
    assert opts == ["www.www.example.com", "www.example.com", "example.com"]


def test_whitespace_and_trailing_dot_are_ignored():
    assert options_for_domain("  email.google.com.  ") == [
        "email.google.com",
        "google.com",
        "www.google.com",
    ]


@pytest.mark.parametrize("domain", ["", "   ", "."])
def test_empty_domain_is_rejected(domain):
    with pytest.raises(ParseError):
        options_for_domain(domain)
