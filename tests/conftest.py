"""Shared fixtures for hostm tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from adapters.clock import FixedClock
from core.logging_config import LOGGER_NAME

STAMP = "2024-01-02 03:04:05"

SAMPLE_HOSTS = (
    "# static table lookup for hostnames\n"
    "127.0.0.1 localhost\n"
    "::1 localhost ip6-localhost\n"
    "\n"
    "10.0.0.5 api.internal.test # staging\n"
    "10.0.0.6 web.internal.test\n"
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep HOSTM_* variables, stray .env files and logger state out of tests."""
    for key in ("HOSTM_HOSTS_FILE", "HOSTM_TOOL_NAME", "HOSTM_TIMESTAMP_FORMAT", "HOSTM_VERBOSE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)

    logger = logging.getLogger(LOGGER_NAME)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(STAMP)


@pytest.fixture
def hosts_path(tmp_path: Path) -> Path:
    path = tmp_path / "hosts"
    path.write_text(SAMPLE_HOSTS, encoding="utf-8")
    return path
