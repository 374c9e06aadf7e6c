# tests/test_mock_resolver.py
import pytest

from siteid.exceptions import FetchError
from siteid.info import Info
from siteid.resolve import MockResolver


def test_mock_returns_canned_info():
    info = Info(owner="Test Enterprises, Inc")
    r = MockResolver(info)

    assert r.identify_domain("google.com") == info
    assert r.identify_website("https://google.com") == info
    assert r.calls == [("domain", "google.com"), ("website", "https://google.com")]


def test_mock_raises_canned_error():
    err = FetchError("Test error", kind=FetchError.TRANSPORT)
    r = MockResolver(Info(owner="ignored"), err)

    with pytest.raises(FetchError) as ei:
        r.identify_domain("google.com")
    assert ei.value is err

    with pytest.raises(FetchError):
        r.identify_website("https://google.com")


def test_mock_defaults_to_empty_info():
    assert MockResolver().identify_domain("example.com") == Info()
