"""Shared pytest fixtures for email-syntax tests."""

from __future__ import annotations

import os
from typing import Generator

import pytest

from email_syntax.config.settings import Settings, get_settings
from email_syntax.core.validator import EmailSyntaxValidator


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any EMAIL_SYNTAX_* variables so the host env never leaks in."""
    for key in list(os.environ):
        if key.upper().startswith("EMAIL_SYNTAX_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set a representative EMAIL_SYNTAX_* environment and return it."""
    values: dict[str, str] = {
        "EMAIL_SYNTAX_LOG_LEVEL": "DEBUG",
        "EMAIL_SYNTAX_LOWERCASE": "true",
        "EMAIL_SYNTAX_EXTRA_TLDS": "internal, .Corp",
        "EMAIL_SYNTAX_LOCAL__SPACES": "false",
        "EMAIL_SYNTAX_DOMAIN__LOCALHOST": "true",
        "EMAIL_SYNTAX_DOMAIN__CHARS_AFTER_DOT": "-1",
    }
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


@pytest.fixture()
def validator() -> EmailSyntaxValidator:
    """Validator with every rule at its default."""
    return EmailSyntaxValidator()
