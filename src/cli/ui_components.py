"""Componentes de UI para la CLI (Rich).

Separa los detalles visuales de la lógica de los comandos.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.errors import HostmError
from core.domain.models import MutationResult, Operation, SearchReport

_VERBS = {
    Operation.CREATE: "Created",
    Operation.UPDATE: "Updated",
    Operation.DELETE: "Deleted",
}


def print_mutation(console: Console, result: MutationResult) -> None:
    """Línea de confirmación tras create/update/delete."""

    verb = _VERBS[result.operation]
    body = Text(f"{verb} mapping: ", style="green")
    if result.ip is None:
        body.append(result.domain, style="bold")
    else:
        body.append(f"{result.domain} -> {result.ip}", style="bold")
    console.print(body)


def build_search_table(report: SearchReport) -> Table:
    table = Table(title=f"Lines containing '{report.domain}'")
    table.add_column("Line", style="cyan", justify="right", no_wrap=True)
    table.add_column("Content", style="white")
    for match in report.matches:
        table.add_row(str(match.line_number), match.text)
    return table


def print_search_report(console: Console, report: SearchReport, *, as_table: bool = False) -> None:
    """Lista las coincidencias (`  <n>: <línea>`) o un aviso si no hay."""

    if not report.found:
        console.print(Text(f"No line contains '{report.domain}'", style="yellow"))
        return

    if as_table:
        console.print(build_search_table(report))
        return

    console.print(Text(f"Found lines containing '{report.domain}':", style="cyan"))
    for match in report.matches:
        console.print(Text(f"  {match.line_number}: {match.text}"))


def print_error(console: Console, error: HostmError) -> None:
    body = Text("Error: ", style="bold red")
    body.append(str(error))
    if error.hint:
        body.append(f" ({error.hint})", style="dim")
    console.print(body)
