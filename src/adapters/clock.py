"""Clock implementations for audit timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.config import AppSettings


@dataclass(frozen=True)
class LocalClock:
    """Wall-clock time in the local timezone."""

    fmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "LocalClock":
        return cls(fmt=settings.timestamp_format)

    def now(self) -> str:
        return datetime.now().strftime(self.fmt)


@dataclass(frozen=True)
class FixedClock:
    """Always returns the same timestamp (tests, reproducible output)."""

    value: str

    def now(self) -> str:
        return self.value
