"""Pure transformations of hosts file content.

Each operation takes the full document text and returns either the new full
text (create/update/delete) or a report (search). Nothing here touches the
filesystem or the clock: the caller passes the audit timestamp in.

Lines are split on `\\n` only. A `\\r` left over from CRLF files stays part of
the line text, and the trailing-newline convention of the input is carried
over to the output.
"""

from __future__ import annotations

import logging

from core.domain.errors import DomainAlreadyExistsError, DomainNotFoundError
from core.domain.matcher import HostsMatcher
from core.domain.models import MutationResult, Operation, SearchMatch, SearchReport

logger = logging.getLogger("hostm.mutations")


def split_lines(content: str) -> list[str]:
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def join_lines(lines: list[str], *, like: str) -> str:
    """Join `lines` back, ending with a newline only if `like` did."""

    return "\n".join(lines) + ("\n" if like.endswith("\n") else "")


def format_record(ip: str, domain: str, action: str, tool: str, timestamp: str) -> str:
    return f"{ip} {domain} # {action} by {tool} {timestamp}"


def create_mapping(
    content: str,
    domain: str,
    ip: str,
    *,
    tool: str,
    timestamp: str,
) -> MutationResult:
    """Append a new record for `domain`, refusing if one already exists."""

    matcher = HostsMatcher(domain)
    lines = split_lines(content)
    for line in lines:
        if matcher(line):
            logger.debug("Existing record: %s", line)
            raise DomainAlreadyExistsError(domain)

    new_line = format_record(ip, domain, "created", tool, timestamp)
    logger.debug("Appending line: %s", new_line)
    lines.append(new_line)
    return MutationResult(
        operation=Operation.CREATE,
        domain=domain,
        ip=ip,
        content=join_lines(lines, like=content),
        affected_lines=[new_line],
    )


def update_mapping(
    content: str,
    domain: str,
    ip: str,
    *,
    tool: str,
    timestamp: str,
) -> MutationResult:
    """Rewrite the first record for `domain` with the new address."""

    matcher = HostsMatcher(domain)
    lines = split_lines(content)
    for index, line in enumerate(lines):
        if matcher(line):
            new_line = format_record(ip, domain, "updated", tool, timestamp)
            logger.debug("Updating line %d: %s => %s", index + 1, line, new_line)
            lines[index] = new_line
            return MutationResult(
                operation=Operation.UPDATE,
                domain=domain,
                ip=ip,
                content=join_lines(lines, like=content),
                affected_lines=[line],
            )

    raise DomainNotFoundError(domain, hint="use 'create' to add a new mapping")


def delete_mapping(content: str, domain: str) -> MutationResult:
    """Drop every record for `domain`."""

    matcher = HostsMatcher(domain)
    kept: list[str] = []
    removed: list[str] = []
    for line in split_lines(content):
        if matcher(line):
            logger.debug("Deleting line: %s", line)
            removed.append(line)
        else:
            kept.append(line)

    if not removed:
        raise DomainNotFoundError(domain, hint="nothing to delete")

    return MutationResult(
        operation=Operation.DELETE,
        domain=domain,
        content=join_lines(kept, like=content),
        affected_lines=removed,
    )


def search_mappings(content: str, domain: str) -> SearchReport:
    """Plain substring lookup over raw lines; no address check applies."""

    matches = [
        SearchMatch(line_number=number, text=line.rstrip("\r"))
        for number, line in enumerate(split_lines(content), start=1)
        if domain in line
    ]
    return SearchReport(domain=domain, matches=matches)
