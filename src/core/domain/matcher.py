"""Line matching for hosts mapping records.

A line is a record for a domain when both hold:

- it starts with a dotted-quad address followed by whitespace;
- the domain appears somewhere in it as a whole token.

Word characters are ASCII letters, digits and underscore, so `.` and `-`
delimit tokens. The domain is always escaped before compiling.
"""

from __future__ import annotations

import re

from core.domain.errors import InvalidDomainError

ADDRESS_PREFIX_RE = re.compile(r"^([0-9]+\.){3}[0-9]+\s+", re.ASCII)


class HostsMatcher:
    """Precompiled matcher for one domain, reused across every line."""

    def __init__(self, domain: str) -> None:
        if not domain.strip():
            raise InvalidDomainError(domain)
        self.domain = domain
        self._domain_re = re.compile(rf"\b{re.escape(domain)}\b", re.ASCII)

    def has_address_prefix(self, line: str) -> bool:
        return ADDRESS_PREFIX_RE.match(line) is not None

    def has_domain_token(self, line: str) -> bool:
        return self._domain_re.search(line) is not None

    def __call__(self, line: str) -> bool:
        return self.has_address_prefix(line) and self.has_domain_token(line)


def is_mapping_for(line: str, domain: str) -> bool:
    """Return True if `line` is a mapping record for `domain`."""

    return HostsMatcher(domain)(line)
