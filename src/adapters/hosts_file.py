"""Filesystem access for the hosts file.

Guard, read and write are kept separate so the pipeline can check the path
before touching it and only write once the new content is fully computed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.errors import (
    HostsFileNotFoundError,
    HostsPermissionError,
    NotAFileError,
    ReadFailedError,
    WriteFailedError,
)

logger = logging.getLogger("hostm.hosts_file")


def ensure_hosts_file(path: Path) -> None:
    """Fail unless `path` exists and is a regular file."""

    logger.debug("Checking hosts file: %s", path)
    if not path.exists():
        raise HostsFileNotFoundError(path)
    if not path.is_file():
        raise NotAFileError(path)


def read_hosts_file(path: Path) -> str:
    """Read the whole file as UTF-8 text, keeping line endings untouched."""

    logger.debug("Reading hosts file: %s", path)
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailedError(path, exc) from exc


def write_hosts_file(path: Path, content: str) -> None:
    """Overwrite `path` with `content` in full."""

    logger.debug("Writing hosts file: %s", path)
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except PermissionError as exc:
        raise HostsPermissionError(path) from exc
    except OSError as exc:
        raise WriteFailedError(path, exc) from exc
