"""Shared pytest fixtures for job-digest tests."""

from __future__ import annotations

from typing import Any, Generator

import pytest

from jobdigest.config.settings import Settings, get_settings


@pytest.fixture()
def env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set minimal env vars and return them as a dict.

    Every test that needs a ``Settings`` instance should use this fixture
    (or ``settings``) to avoid leaking real ``.env`` values into tests.
    """
    values: dict[str, str] = {
        # SMTP
        "SMTP_HOST": "smtp.example.com",
        "SMTP_PORT": "587",
        "SMTP_USER": "digest@example.com",
        "SMTP_PASS": "test-password",
        "TO_EMAIL": "seeker@example.com",
        # Caps
        "MAX_PER_BOARD": "6",
        "MAX_TOTAL": "20",
        # General
        "DRY_RUN": "false",
        "LOG_LEVEL": "DEBUG",
    }
    for key in ("FROM_EMAIL", "SMTP_SECURE", "KEYWORDS", "KEYWORD_FILTER_ENABLED"):
        monkeypatch.delenv(key, raising=False)
    for key, val in values.items():
        monkeypatch.setenv(key, val)
    return values


@pytest.fixture()
def settings(env_vars: dict[str, str]) -> Generator[Settings, None, None]:
    """Return a fresh ``Settings`` loaded from mocked env vars.

    Clears the ``get_settings`` LRU cache before and after the test so
    singleton state never leaks between tests.
    """
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


class FakePage:
    """Stand-in for a Playwright page.

    *pages* maps a URL to the anchors the page script would return, or to an
    exception raised on navigation.
    """

    def __init__(self, pages: dict[str, Any]) -> None:
        self.pages = pages
        self.visited: list[str] = []
        self.goto_kwargs: list[dict[str, Any]] = []
        self._current: str | None = None

    def goto(self, url: str, **kwargs: Any) -> None:
        self.visited.append(url)
        self.goto_kwargs.append(kwargs)
        outcome = self.pages.get(url, [])
        if isinstance(outcome, Exception):
            raise outcome
        self._current = url

    def evaluate(self, expression: str, arg: Any = None) -> Any:
        return self.pages.get(self._current, [])


@pytest.fixture()
def fake_page_factory() -> type[FakePage]:
    return FakePage
