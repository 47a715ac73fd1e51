"""Aggregated results of a run and their rendering."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.filesize import decimal
from rich.table import Table

from swimclean.cleaner import CleanResult, OutcomeKind
from swimclean.errors import TraversalError


@dataclass
class Report:
    """Everything a run produced, in processing order."""

    root: Path | None = None
    results: list[CleanResult] = field(default_factory=list)
    traversal_errors: list[TraversalError] = field(default_factory=list)

    def add(self, result: CleanResult) -> None:
        self.results.append(result)

    def add_error(self, error: TraversalError) -> None:
        self.traversal_errors.append(error)

    @property
    def counts(self) -> Counter[OutcomeKind]:
        counts: Counter[OutcomeKind] = Counter({kind: 0 for kind in OutcomeKind})
        counts.update(result.kind for result in self.results)
        return counts

    def count(self, kind: OutcomeKind) -> int:
        return self.counts[kind]

    @property
    def failures(self) -> list[CleanResult]:
        """Failed projects sorted by path."""
        return sorted(
            (r for r in self.results if r.kind is OutcomeKind.FAILED),
            key=lambda r: r.path,
        )

    @property
    def bytes_reclaimed(self) -> int:
        return sum(
            r.outcome.bytes_reclaimed or 0
            for r in self.results
            if r.kind is OutcomeKind.REMOVED
        )

    def outcome_for(self, path: Path) -> OutcomeKind | None:
        """Look up the outcome recorded for a project path."""
        for result in self.results:
            if result.path == path:
                return result.kind
        return None


def format_result(result: CleanResult) -> str:
    """One-line rich markup for a single result (verbose progress)."""
    outcome = result.outcome
    size = f" ({decimal(outcome.bytes_reclaimed)})" if outcome.bytes_reclaimed is not None else ""
    if outcome.kind is OutcomeKind.REMOVED:
        return f"[green]Cleaned[/green] {result.path}{size}"
    if outcome.kind is OutcomeKind.FAILED:
        return f"[red]Failed[/red] {result.path}: {outcome.reason}"
    if outcome.kind is OutcomeKind.SKIPPED:
        return f"[dim]Skipped {result.path}{size} ({outcome.reason})[/dim]"
    return f"[dim]Nothing to clean in {result.path}[/dim]"


def render_report(report: Report, console: Console) -> None:
    """Print the end-of-run summary."""
    if not report.results and not report.traversal_errors:
        where = f" in {report.root}" if report.root else ""
        console.print(f"No swim projects found{where}")
        return

    counts = report.counts
    total = len(report.results)
    console.print(
        f"[bold green]{total} swim project{'' if total == 1 else 's'} processed[/bold green]"
    )

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("Outcome", style="bold")
    summary.add_column("Count", justify="right")
    for kind in OutcomeKind:
        summary.add_row(kind.value, str(counts[kind]))
    console.print(summary)

    reclaimed = report.bytes_reclaimed
    if reclaimed:
        console.print(f"{decimal(reclaimed)} successfully cleaned")
    elif counts[OutcomeKind.REMOVED] == 0:
        console.print("No projects cleaned")

    if report.failures:
        table = Table(title="Failed projects")
        table.add_column("Project", style="bold")
        table.add_column("Reason", style="red")
        for result in report.failures:
            table.add_row(str(result.path), result.outcome.reason or "")
        console.print(table)

    if report.traversal_errors:
        table = Table(title="Unreadable directories")
        table.add_column("Directory", style="bold")
        table.add_column("Reason", style="yellow")
        for error in sorted(report.traversal_errors, key=lambda e: e.path):
            table.add_row(str(error.path), error.reason)
        console.print(table)
