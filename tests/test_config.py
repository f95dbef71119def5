"""Tests for token resolution and logging setup."""

import logging

import pytest

from repo_spy.config import resolve_token
from repo_spy.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GH_TOKEN", raising=False)


class TestResolveToken:
    def test_explicit_wins(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "env")
        assert resolve_token("flag") == "flag"

    def test_github_token(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "env")
        assert resolve_token() == "env"

    def test_gh_token_fallback(self, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "gh")
        assert resolve_token() == "gh"

    def test_blank_values_ignored(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "   ")
        assert resolve_token("  ") is None

    def test_none(self):
        assert resolve_token() is None


class TestLogging:
    def test_get_logger_namespaced(self):
        assert get_logger("fetcher").name == "repo_spy.fetcher"
        assert get_logger("repo_spy.app").name == "repo_spy.app"
        assert get_logger().name == "repo_spy"

    def test_configure_is_idempotent(self):
        configure_logging()
        logger = configure_logging()
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_verbose(self):
        logger = configure_logging(verbose=True)
        assert logger.level == logging.DEBUG
