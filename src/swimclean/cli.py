"""Command-line interface for swim-clean-all."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.filesize import decimal
from rich.prompt import Confirm

from swimclean import __version__
from swimclean.cleaner import CleanResult
from swimclean.config import DEFAULT_MAX_DEPTH, load_config, merge_search_config
from swimclean.errors import ConfigError, TraversalError
from swimclean.logging import get_logger, setup_logging
from swimclean.project import Project
from swimclean.report import format_result, render_report
from swimclean.runner import run

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

# swim passes its subcommand name through as the first argument
SUBCOMMAND_NAME = "clean-all"

console = Console()
err_console = Console(stderr=True)
log = get_logger("cli")


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="swim-clean-all",
        description=(
            "Recursively clean all swim projects in a given directory that "
            "match the specified criteria"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "search_root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="The root directory to recursively search for swim projects (default: cwd)",
    )
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        metavar="PATH",
        help="Directory to skip when traversing (can be repeated)",
    )
    parser.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        help=f"Maximum depth search limit (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Manually specify a config path, e.g., foo.yaml",
    )
    parser.add_argument(
        "--ignore-config",
        action="store_true",
        help="Do not load and extend the config file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debugging information and each project as it is processed",
    )
    parser.add_argument(
        "-n", "--dry-run",
        action="store_true",
        help="Report what would be removed without deleting anything",
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Ask before cleaning each project",
    )
    return parser


def _ask(project: Project, size: int | None) -> bool:
    shown = decimal(size) if size is not None else "unknown size"
    return Confirm.ask(f"  [bold blue]Clean {project.root}? ({shown})[/bold blue]", console=console)


def run_cli(args: Sequence[str]) -> int:
    """Run the CLI with the given arguments."""
    args = list(args)
    if args and args[0] == SUBCOMMAND_NAME:
        args = args[1:]

    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        file_config = load_config(config_path=parsed.config, ignore_file=parsed.ignore_config)
        file_config.logging.verbose = parsed.verbose
        setup_logging(file_config.logging)

        search = merge_search_config(
            file_config,
            root=parsed.search_root,
            skip=parsed.skip,
            max_depth=parsed.max_depth,
        )
    except ConfigError as e:
        err_console.print(f"[bold red]error:[/bold red] {e}")
        return EXIT_CONFIG_ERROR

    def on_result(result: CleanResult) -> None:
        if parsed.verbose or parsed.dry_run:
            console.print(format_result(result))

    def on_error(error: TraversalError) -> None:
        if parsed.verbose:
            err_console.print(f"[yellow]Cannot read {error.path}: {error.reason}[/yellow]")

    confirm = _ask if parsed.interactive else None

    try:
        if parsed.interactive:
            report = run(search, dry_run=parsed.dry_run, confirm=confirm,
                         on_result=on_result, on_error=on_error)
        else:
            with console.status(f"Cleaning swim projects in [bold]{search.root}[/bold]"):
                report = run(search, dry_run=parsed.dry_run,
                             on_result=on_result, on_error=on_error)
    except KeyboardInterrupt:
        err_console.print("[bold red]Interrupted[/bold red]")
        return EXIT_INTERRUPTED

    console.print()
    render_report(report, console)
    return EXIT_OK
