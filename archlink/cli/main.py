"""Main CLI entry point for archlink."""

import os
import sys
import logging
from typing import List, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from .. import __version__
from ..core.configuration import ConfigurationManager
from ..core.exceptions import (
    ArchLinkError, EmptyResultError, InputValidationError, InstallExhaustionError, SourceFetchError
)
from ..core.interfaces import Candidate, PackageSource
from ..installer.orchestrator import InstallOrchestrator
from ..search.engine import PackageSearchEngine

# Operator-facing output goes to stdout, warnings and errors to stderr
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    # Check environment variable for log level override
    env_log_level = os.getenv('ARCHLINK_LOG_LEVEL', '').upper()
    if env_log_level in ['DEBUG', 'INFO', 'WARNING', 'ERROR']:
        level = getattr(logging, env_log_level)
    else:
        level = logging.DEBUG if verbose else logging.WARNING

    # Check environment variable for log format override
    log_format = os.getenv('ARCHLINK_LOG_FORMAT', '%(levelname)s: %(message)s')

    logging.basicConfig(
        level=level,
        format=log_format
    )


def print_source_warning(error: SourceFetchError):
    """Report a failed catalog search without aborting."""
    err_console.print(f"[yellow]Warning: {escape(error.source)} search failed: {escape(error.message)}[/yellow]")


def print_install_progress(message: str):
    """Report installer progress."""
    if message.startswith("Successfully"):
        console.print(f"[green]{escape(message)}[/green]")
    else:
        console.print(f"[bold white]{escape(message)}[/bold white]")


def display_search_results(candidates: List[Candidate], query: str):
    """Display ranked candidates as a numbered list."""
    console.print(f"[bold white]Suggestions for '{escape(query)}':[/bold white]")
    for rank, candidate in enumerate(candidates, start=1):
        console.print(
            f"[bold white]{rank}.[/bold white] "
            f"[green]{escape(candidate.name):<30}[/green] "
            f"[blue]{escape(candidate.version):<15}[/blue] - "
            f"{escape(candidate.description)} "
            f"[cyan]{escape(f'[{candidate.source.value}]')}[/cyan]"
        )


def prompt_for_selection(candidates: List[Candidate]) -> Optional[Candidate]:
    """
    Ask the operator to pick a candidate.

    Returns:
        The chosen candidate, or None if the operator aborted.
    """
    try:
        answer = click.prompt(
            "Enter the number of the package to install (0 to exit)",
            default="0",
            show_default=False
        )
    except click.Abort:
        # EOF on stdin reads as an empty answer
        return None
    try:
        choice = int(answer.strip())
    except ValueError:
        choice = 0

    if choice == 0:
        return None
    if choice < 0 or choice > len(candidates):
        console.print("[yellow]Invalid selection. Exiting.[/yellow]")
        return None
    return candidates[choice - 1]


def confirm_install(candidate: Candidate) -> bool:
    """
    Ask before installing. Anything but an answer starting with "y" cancels.
    """
    try:
        answer = click.prompt(f"Install '{candidate.name}'? (y/N)", default="", show_default=False)
    except click.Abort:
        return False
    return answer.strip().lower().startswith("y")


def run_install(ctx, package: str, source: PackageSource):
    """Install a package and exit non-zero if every installer failed."""
    orchestrator = InstallOrchestrator(config=ctx.obj['config'], reporter=print_install_progress)
    try:
        orchestrator.install(package, source)
    except InstallExhaustionError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="archlink")
@click.option('--config', '-c', type=click.Path(),
              default=lambda: os.getenv('ARCHLINK_CONFIG'),
              help='Path to configuration file (env: ARCHLINK_CONFIG)')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose logging (env: ARCHLINK_VERBOSE)')
@click.pass_context
def cli(ctx, config, verbose):
    """
    Find and install Arch Linux packages.

    archlink searches the official repositories and the AUR at the same time,
    ranks the combined results and installs the one you pick with pacman or
    an AUR helper (yay, paru).

    \b
    Examples:

      # Search both catalogs
      archlink search firefox

      # Multi-word queries
      archlink search web browser

      # Install without searching
      archlink install neovim

    Settings are read from /etc/archlink/config.yaml (YAML only; an older
    config.toml is not read).
    """
    ctx.ensure_object(dict)

    # Apply environment variable for verbose if not provided via CLI
    if not verbose and os.getenv('ARCHLINK_VERBOSE', '').lower() in ['true', '1', 'yes']:
        verbose = True

    ctx.obj['verbose'] = verbose
    setup_logging(verbose)
    ctx.obj['config'] = ConfigurationManager(config).load()


@cli.command()
@click.argument('query', nargs=-1)
@click.pass_context
def search(ctx, query):
    """
    Search for packages in official repos and AUR.

    Results are ranked by how close the package name is to the query, with a
    boost for every query word found in the description. Pick a number to
    install that package.
    """
    query_text = " ".join(query).strip()

    try:
        if not query_text:
            raise InputValidationError("Query cannot be empty.")

        engine = PackageSearchEngine(config=ctx.obj['config'], warning_handler=print_source_warning)

        console.print("[bold white]Searching official repos and AUR...[/bold white]")
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task(f"Searching for '{escape(query_text)}'...", total=None)
            candidates = engine.search(query_text)
            progress.update(task, completed=True)

    except EmptyResultError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]")
        return
    except ArchLinkError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if ctx.obj['verbose']:
            err_console.print_exception()
        sys.exit(1)

    display_search_results(candidates, query_text)

    selected = prompt_for_selection(candidates)
    if selected is None:
        return

    if not confirm_install(selected):
        console.print("[yellow]Installation cancelled.[/yellow]")
        return

    run_install(ctx, selected.name, selected.source)


@cli.command()
@click.argument('package')
@click.pass_context
def install(ctx, package):
    """
    Install a package directly.

    Tries pacman first, then every AUR helper found on PATH.
    """
    package = package.strip()
    if not package:
        err_console.print("[red]Error:[/red] Package name cannot be empty.")
        sys.exit(1)

    run_install(ctx, package, PackageSource.UNKNOWN)


def main():
    """Console script entry point."""
    return cli(obj={})


if __name__ == '__main__':
    sys.exit(main())
