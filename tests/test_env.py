import logging

import pytest

from siteid.config import BOT_NAME, DEFAULT_USER_AGENT, load_settings
from siteid.logging_setup import configure_logging


def test_user_agent_has_name(monkeypatch):
    monkeypatch.delenv("FETCH_USER_AGENT", raising=False)
    assert BOT_NAME in DEFAULT_USER_AGENT
    assert load_settings().fetch.user_agent == DEFAULT_USER_AGENT


def test_settings_load_defaults(monkeypatch):
    for name in ("FETCH_READ_TIMEOUT_S", "FETCH_MAX_REDIRECTS", "FETCH_MAX_BODY_BYTES"):
        monkeypatch.delenv(name, raising=False)

    cfg = load_settings()

    assert cfg.fetch.read_timeout_s == 10.0
    assert cfg.fetch.max_redirects == 5
    assert cfg.fetch.max_body_bytes == 2_000_000


def test_settings_read_env_at_call_time(monkeypatch):
    monkeypatch.setenv("FETCH_MAX_BODY_BYTES", "4096")
    monkeypatch.setenv("FETCH_USER_AGENT", "curl/8.0")
    monkeypatch.setenv("SITEID_LOG_LEVEL", "debug")

    cfg = load_settings()

    assert cfg.fetch.max_body_bytes == 4096
    # bot name is forced into custom agents
    assert cfg.fetch.user_agent == f"{BOT_NAME} curl/8.0"
    assert cfg.log_level == "DEBUG"


def test_bad_int_env_raises(monkeypatch):
    monkeypatch.setenv("FETCH_MAX_REDIRECTS", "lots")
    with pytest.raises(ValueError, match="FETCH_MAX_REDIRECTS"):
        load_settings()


def test_configure_logging_sets_package_level():
    configure_logging("debug")
    assert logging.getLogger("siteid").level == logging.DEBUG

    configure_logging("not-a-level")
    assert logging.getLogger("siteid").level == logging.WARNING


def test_configure_logging_defaults_to_env_level(monkeypatch):
    monkeypatch.setenv("SITEID_LOG_LEVEL", "info")
    configure_logging()
    assert logging.getLogger("siteid").level == logging.INFO
