"""Error hierarchy for hosts file operations.

Every failure the tool reports is a `HostmError`. The CLI turns these into a
single red line plus exit code 1; anything else is a bug and propagates.
"""

from __future__ import annotations

from pathlib import Path


class HostmError(Exception):
    """Base exception for hostm."""

    hint: str | None = None


class HostsFileError(HostmError):
    """Failure tied to the hosts file itself."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class HostsFileNotFoundError(HostsFileError):
    """Raised when the target path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"hosts file does not exist: {path}", path)


class NotAFileError(HostsFileError):
    """Raised when the target path exists but is not a regular file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"path is not a file: {path}", path)


class ReadFailedError(HostsFileError):
    """Raised when an existing hosts file cannot be read."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"cannot read file: {path} ({cause})", path)


class HostsPermissionError(HostsFileError):
    """Raised when writing the hosts file is not permitted."""

    hint = "try again with elevated privileges (e.g. sudo)"

    def __init__(self, path: Path) -> None:
        super().__init__(f"permission denied, cannot write file: {path}", path)


class WriteFailedError(HostsFileError):
    """Raised for any other failure while writing the hosts file."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"cannot write file: {path} ({cause})", path)


class DomainError(HostmError):
    """Failure tied to the requested domain."""

    def __init__(self, message: str, domain: str) -> None:
        super().__init__(message)
        self.domain = domain


class DomainNotFoundError(DomainError):
    """Raised when update/delete finds no mapping record for the domain."""

    def __init__(self, domain: str, *, hint: str | None = None) -> None:
        super().__init__(f"domain '{domain}' does not exist", domain)
        self.hint = hint


class DomainAlreadyExistsError(DomainError):
    """Raised when create finds an existing mapping record for the domain."""

    hint = "use 'update' to change its address"

    def __init__(self, domain: str) -> None:
        super().__init__(f"domain '{domain}' already exists", domain)


class InvalidDomainError(DomainError):
    """Raised when the domain is empty or only whitespace."""

    def __init__(self, domain: str) -> None:
        super().__init__("domain must not be empty", domain)
