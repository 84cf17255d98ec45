"""Tests for settings, clocks and logging setup."""

import logging
import re
import sys
from pathlib import Path

import pytest
from rich.console import Console

from adapters.clock import FixedClock, LocalClock
from adapters.json_exporter import search_report_to_json
from core.config import AppSettings, get_default_hosts_path
from core.domain.models import SearchMatch, SearchReport
from core.interfaces.clock import Clock
from core.logging_config import LOGGER_NAME, configure_logging


class TestSettings:
    """AppSettings defaults and HOSTM_ environment overrides."""

    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.hosts_file == get_default_hosts_path()
        assert settings.tool_name == "hostm"
        assert settings.timestamp_format == "%Y-%m-%d %H:%M:%S"
        assert settings.verbose is False

    @pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX default path")
    def test_posix_default_path(self) -> None:
        assert get_default_hosts_path() == Path("/etc/hosts")

    def test_windows_default_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setenv("SystemRoot", r"D:\Win")
        assert get_default_hosts_path() == Path(r"D:\Win") / "System32" / "drivers" / "etc" / "hosts"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HOSTM_HOSTS_FILE", str(tmp_path / "hosts"))
        monkeypatch.setenv("HOSTM_TOOL_NAME", "ops")
        settings = AppSettings()
        assert settings.hosts_file == tmp_path / "hosts"
        assert settings.tool_name == "ops"

    def test_dotenv_file(self, tmp_path: Path) -> None:
        """The autouse fixture chdirs into tmp_path, so .env is picked up here."""
        (tmp_path / ".env").write_text("HOSTM_VERBOSE=true\n", encoding="utf-8")
        assert AppSettings().verbose is True

    def test_init_kwargs_win(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HOSTM_HOSTS_FILE", "/from/env")
        assert AppSettings(hosts_file=tmp_path).hosts_file == tmp_path


class TestClocks:
    def test_fixed(self) -> None:
        clock = FixedClock("then")
        assert clock.now() == "then"
        assert isinstance(clock, Clock)

    def test_local_default_format(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", LocalClock().now())

    def test_local_from_settings(self) -> None:
        clock = LocalClock.from_settings(AppSettings(timestamp_format="%Y"))
        assert re.fullmatch(r"\d{4}", clock.now())


class TestLogging:
    def test_verbose_levels(self) -> None:
        assert configure_logging(True).level == logging.DEBUG
        assert configure_logging(False).level == logging.WARNING

    def test_single_handler(self) -> None:
        configure_logging(True)
        logger = configure_logging(True)
        assert len(logger.handlers) == 1
        assert logger.name == LOGGER_NAME

    def test_debug_goes_to_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(True, console=Console(width=200))
        logging.getLogger("hostm.test").debug("reading things")
        assert "[verbose] reading things" in capsys.readouterr().out

    def test_quiet_hides_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(False, console=Console(width=200))
        logging.getLogger("hostm.test").debug("reading things")
        assert "reading things" not in capsys.readouterr().out


class TestJsonExport:
    def test_stable_payload(self) -> None:
        report = SearchReport(domain="a.com", matches=[SearchMatch(line_number=1, text="1.2.3.4 a.com")])
        assert search_report_to_json(report) == (
            '{\n  "domain": "a.com",\n  "matches": [\n    {\n'
            '      "line_number": 1,\n      "text": "1.2.3.4 a.com"\n    }\n  ]\n}'
        )
