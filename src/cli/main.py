"""hostm CLI (Typer).

Global options (`--hosts-file`, `--verbose`) live on the callback; each
subcommand builds a `HostsEditor` from the resulting settings and only deals
with presentation.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from adapters.json_exporter import search_report_to_json
from cli.ui_components import print_error, print_mutation, print_search_report
from core.config import APP_NAME, APP_VERSION, AppSettings
from core.domain.errors import HostmError
from core.logging_config import configure_logging
from core.services.hosts_pipeline import HostsEditor

app = typer.Typer(
    name=APP_NAME,
    no_args_is_help=True,
    add_completion=False,
    help="Manage entries of the system hosts file.",
)

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    hosts_file: Optional[Path] = typer.Option(
        None,
        "--hosts-file",
        "-f",
        help="Hosts file path (default: the platform hosts file, or HOSTM_HOSTS_FILE).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print step-by-step diagnostics.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    overrides: dict[str, object] = {}
    if hosts_file is not None:
        overrides["hosts_file"] = hosts_file
    if verbose:
        overrides["verbose"] = True

    settings = AppSettings(**overrides)
    configure_logging(settings.verbose, console=_console)
    ctx.obj = settings


def _editor(ctx: typer.Context) -> HostsEditor:
    settings: AppSettings = ctx.obj
    return HostsEditor.from_settings(settings)


def _require_domain(value: str) -> str:
    if not value.strip():
        raise typer.BadParameter("domain must not be empty")
    return value


def _fail(error: HostmError) -> NoReturn:
    print_error(_err_console, error)
    raise typer.Exit(code=1) from error


@app.command()
def create(
    ctx: typer.Context,
    domain: str = typer.Argument(..., callback=_require_domain, help="Domain name."),
    ip: str = typer.Argument(..., help="IP address."),
) -> None:
    """Create a new domain mapping."""

    try:
        result = _editor(ctx).create(domain, ip)
    except HostmError as exc:
        _fail(exc)
    print_mutation(_console, result)


@app.command()
def update(
    ctx: typer.Context,
    domain: str = typer.Argument(..., callback=_require_domain, help="Domain name."),
    ip: str = typer.Argument(..., help="New IP address."),
) -> None:
    """Update the address of an existing domain mapping."""

    try:
        result = _editor(ctx).update(domain, ip)
    except HostmError as exc:
        _fail(exc)
    print_mutation(_console, result)


@app.command()
def delete(
    ctx: typer.Context,
    domain: str = typer.Argument(..., callback=_require_domain, help="Domain to delete."),
) -> None:
    """Delete every mapping for a domain."""

    try:
        result = _editor(ctx).delete(domain)
    except HostmError as exc:
        _fail(exc)
    print_mutation(_console, result)


@app.command()
def search(
    ctx: typer.Context,
    domain: str = typer.Argument(..., help="Text to look for (partial matches allowed)."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    as_table: bool = typer.Option(False, "--table", help="Render matches as a table."),
) -> None:
    """Find lines containing a domain."""

    try:
        report = _editor(ctx).search(domain)
    except HostmError as exc:
        _fail(exc)

    if as_json:
        typer.echo(search_report_to_json(report))
        return
    print_search_report(_console, report, as_table=as_table)


def run() -> None:
    """Entry-point for the `hostm` console script."""

    app()


if __name__ == "__main__":
    run()
