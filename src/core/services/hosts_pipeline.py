"""Read-modify-write orchestration for one hosts file.

The CLI delegates here so the same flow is usable from tests or other
entry-points: guard the path, read it, transform it in memory and, for
mutations, write the result back in one go. A failing transformation never
reaches the writer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from adapters.clock import LocalClock
from adapters.hosts_file import ensure_hosts_file, read_hosts_file, write_hosts_file
from core.config import AppSettings
from core.domain.models import MutationResult, SearchReport
from core.interfaces.clock import Clock
from core.services.hosts_mutations import (
    create_mapping,
    delete_mapping,
    search_mappings,
    update_mapping,
)

logger = logging.getLogger("hostm.pipeline")


@dataclass
class HostsEditor:
    """Applies hostm operations to the file at `path`."""

    path: Path
    tool_name: str = "hostm"
    clock: Clock = field(default_factory=LocalClock)

    @classmethod
    def from_settings(cls, settings: AppSettings, *, clock: Clock | None = None) -> "HostsEditor":
        return cls(
            path=settings.hosts_file,
            tool_name=settings.tool_name,
            clock=clock or LocalClock.from_settings(settings),
        )

    def _load(self) -> str:
        ensure_hosts_file(self.path)
        return read_hosts_file(self.path)

    def _commit(self, result: MutationResult) -> MutationResult:
        write_hosts_file(self.path, result.content)
        return result

    def create(self, domain: str, ip: str) -> MutationResult:
        content = self._load()
        logger.debug("Creating mapping: %s -> %s", domain, ip)
        result = create_mapping(content, domain, ip, tool=self.tool_name, timestamp=self.clock.now())
        return self._commit(result)

    def update(self, domain: str, ip: str) -> MutationResult:
        content = self._load()
        logger.debug("Updating mapping: %s -> %s", domain, ip)
        result = update_mapping(content, domain, ip, tool=self.tool_name, timestamp=self.clock.now())
        return self._commit(result)

    def delete(self, domain: str) -> MutationResult:
        content = self._load()
        logger.debug("Deleting domain: %s", domain)
        return self._commit(delete_mapping(content, domain))

    def search(self, domain: str) -> SearchReport:
        content = self._load()
        logger.debug("Searching lines containing '%s'", domain)
        return search_mappings(content, domain)
