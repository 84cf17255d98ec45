"""Contract for the time source used in audit comments."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Produces the timestamp written after `# created by <tool>`.

    Implementations return an already formatted string; the core never
    inspects it.
    """

    def now(self) -> str:
        ...
