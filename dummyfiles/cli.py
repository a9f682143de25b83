"""CLI entry point for DummyFiles."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

from dummyfiles_core.config import DummyFilesConfig, load_config
from dummyfiles_core.config.loader import DEFAULT_CONFIG_TEMPLATE
from dummyfiles_core.errors import DummyFilesError
from dummyfiles_core.mirror import Flattener, MirrorBuilder, Restorer
from dummyfiles_core.report import (
    make_file_reports,
    render_report_table,
    text_report_lines,
    write_html_report,
)
from dummyfiles_core.status import ExitStatus
from dummyfiles_core.tree.fs import readable_directory
from dummyfiles_core.verify import TreeComparator

app = typer.Typer(
    name="dummyfiles",
    help="Mirror directory trees as marker files, and restore them after they move.",
)

config_app = typer.Typer(help="Manage DummyFiles configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: DummyFilesConfig | None = None
_log_handler: logging.Handler | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global options that consume the following argument
_VALUE_OPTIONS = {"--config", "-c", "--log-level"}


def _get_config() -> DummyFilesConfig:
    if _config is None:
        return load_config()
    return _config


def _configure_logging(level: str) -> None:
    """Route library logs through rich on stderr at *level*."""
    global _log_handler
    core_logger = logging.getLogger("dummyfiles_core")
    if _log_handler is None:
        _log_handler = RichHandler(console=Console(stderr=True), show_path=False)
        core_logger.addHandler(_log_handler)
    core_logger.setLevel(_LOG_LEVELS[level])


@app.callback()
def callback(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to dummyfiles.yaml")
    ] = None,
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="debug | info | warn | error")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(int(ExitStatus.BAD_ARGUMENTS))
    level = log_level or _config.log_level
    if level not in _LOG_LEVELS:
        rprint(f"[red]Error:[/red] unknown log level {level!r}")
        raise typer.Exit(int(ExitStatus.BAD_ARGUMENTS))
    _configure_logging(level)


@app.command("mirror")
def mirror(
    source: Annotated[str, typer.Argument(help="Directory to mirror")],
    dest: Annotated[str, typer.Argument(help="Where to create the mirror; must not be populated")],
) -> None:
    """Create a tree of marker files with the same shape as SOURCE."""
    cfg = _get_config()
    try:
        errors = MirrorBuilder(cfg.marker.encoding).build(source, dest)
    except DummyFilesError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(int(e.status))

    if errors:
        rprint(f"[yellow]Mirror created with {errors} error(s):[/yellow] {dest}")
        raise typer.Exit(1)
    rprint(f"[green]Mirrored[/green] {source} -> {dest}")


@app.command("restore")
def restore(
    source: Annotated[str, typer.Argument(help="Directory holding the marker files")],
    target: Annotated[
        str | None, typer.Argument(help="Root to restore into (default: SOURCE)")
    ] = None,
) -> None:
    """Move marker files back to their recorded relative paths."""
    cfg = _get_config()
    restorer = Restorer(cfg.marker.encoding, cfg.marker.ignore_prefix)
    try:
        result = restorer.restore(source, target)
    except DummyFilesError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(int(e.status))

    table = Table(title=f"Restore into {target or source}")
    table.add_column("Outcome", style="cyan")
    table.add_column("Files", justify="right")
    table.add_row("restored", str(result.restored))
    table.add_row("already in place", str(result.unchanged))
    table.add_row("ignored", str(result.ignored))
    table.add_row("conflicts", str(result.conflicts))
    table.add_row("errors", str(result.errors))
    table.add_row("unreadable directories", str(result.descend_errors))
    rprint(table)

    if result.status != ExitStatus.OK:
        raise typer.Exit(int(result.status))


@app.command("report")
def report(
    sources: Annotated[list[str], typer.Argument(help="Mirror directories to report on")],
    html: Annotated[
        bool, typer.Option("--html", help="Also write an HTML report (path from config)")
    ] = False,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="HTML report path")
    ] = None,
    ci: Annotated[bool, typer.Option("--ci", help="Plain text output")] = False,
) -> None:
    """Report which marker files have been moved or renamed."""
    cfg = _get_config()
    all_reports = []
    total_errors = 0
    for source in sources:
        if readable_directory(source) is None:
            rprint(f"[red]Error:[/red] {source} does not name a readable directory")
            raise typer.Exit(int(ExitStatus.BAD_ARGUMENTS))
        reports, errors = make_file_reports(
            source, cfg.marker.encoding, cfg.marker.ignore_prefix
        )
        all_reports.extend(reports)
        total_errors += errors

    if ci:
        for line in text_report_lines(all_reports):
            typer.echo(line)
    else:
        rprint(render_report_table(all_reports))

    if html or output:
        path = write_html_report(all_reports, Path(output or cfg.report.html_path))
        rprint(f"[green]Wrote[/green] {path}")

    if total_errors:
        rprint(f"[red]{total_errors} file(s) or directories could not be read.[/red]")
        raise typer.Exit(int(ExitStatus.EXCEPTION_DESCENDING))


@app.command("flatten")
def flatten(
    directory: Annotated[str, typer.Argument(help="Directory to flatten in place")],
    basename: Annotated[
        str | None, typer.Option("--basename", "-b", help="Prefix for the new file names")
    ] = None,
) -> None:
    """Move every nested file to the top of DIRECTORY under a synthesized name."""
    cfg = _get_config()
    name = basename or cfg.flatten.basename
    if not Flattener(cfg.flatten.start_index).flatten(name, directory):
        rprint(f"[red]Error:[/red] could not flatten {directory}")
        raise typer.Exit(1)
    rprint(f"[green]Flattened[/green] {directory}")


@app.command("verify")
def verify(
    first: Annotated[str, typer.Argument(help="One tree root")],
    second: Annotated[str, typer.Argument(help="The other tree root")],
) -> None:
    """Check that two trees have identical structure, ignoring file content."""
    if TreeComparator().verify_mirror(first, second):
        rprint(f"[green]Identical structure:[/green] {first} and {second}")
        return
    rprint(f"[red]Structures differ:[/red] {first} and {second}")
    raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default dummyfiles.yaml in current directory."""
    target = Path("dummyfiles.yaml")
    if target.exists() and not force:
        rprint("[yellow]dummyfiles.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


def _command_names() -> set[str]:
    names = {c.name for c in app.registered_commands if c.name}
    names.update(g.name for g in app.registered_groups if g.name)
    return names


def _preflight(argv: list[str]) -> ExitStatus | None:
    """Status for a command line that names no subcommand or an unknown one.

    Returns None when the arguments should be handed to typer.
    """
    skip_value = False
    for arg in argv:
        if skip_value:
            skip_value = False
            continue
        if arg in _VALUE_OPTIONS:
            skip_value = True
            continue
        if arg.startswith("-"):
            continue
        if arg in _command_names():
            return None
        return ExitStatus.UNKNOWN_APP_SPECIFIED
    if "--help" in argv:
        return None
    return ExitStatus.NO_APP_SPECIFIED


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    status = _preflight(args)
    if status is ExitStatus.NO_APP_SPECIFIED:
        typer.echo("must specify an application: " + ", ".join(sorted(_command_names())), err=True)
        raise SystemExit(int(status))
    if status is ExitStatus.UNKNOWN_APP_SPECIFIED:
        typer.echo(f"unknown application specified: {args}", err=True)
        raise SystemExit(int(status))
    app(args=args, prog_name="dummyfiles")


if __name__ == "__main__":
    main()
