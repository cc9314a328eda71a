"""Tests for scripts/check_addresses.py."""

from __future__ import annotations

import importlib.util
import io
from pathlib import Path
from types import ModuleType
from typing import Generator

import pytest

from email_syntax.config.settings import get_settings

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "check_addresses.py"


@pytest.fixture()
def script() -> Generator[ModuleType, None, None]:
    """Load the script as a module without running ``__main__``."""
    spec = importlib.util.spec_from_file_location("check_addresses", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    get_settings.cache_clear()
    yield module
    get_settings.cache_clear()


class TestCheckAddresses:
    """Exit code and report lines."""

    def test_all_valid(
        self, script: ModuleType, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert script.main(["simple@example.com", '"john..doe"@example.com']) == 0
        out = capsys.readouterr().out
        assert "VALID    simple@example.com" in out
        assert "2 valid, 0 invalid" in out

    def test_some_invalid(
        self, script: ModuleType, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert script.main(["simple@example.com", "john..doe@example.com"]) == 1
        out = capsys.readouterr().out
        assert "INVALID  john..doe@example.com  (consecutive periods outside quotes)" in out
        assert "1 valid, 1 invalid" in out

    def test_reads_stdin(
        self,
        script: ModuleType,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("a@example.com\n\nadmin@mailserver1\n"))
        assert script.main([]) == 1
        assert "1 valid, 1 invalid" in capsys.readouterr().out

    def test_env_settings_applied(
        self,
        script: ModuleType,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("EMAIL_SYNTAX_DOMAIN__LOCALHOST", "true")
        get_settings.cache_clear()
        assert script.main(["admin@mailserver1"]) == 0
