"""Orchestration loop connecting the walker and the cleaner."""

from __future__ import annotations

from collections.abc import Callable

from swimclean.cleaner import CleanResult, ConfirmCallback, clean
from swimclean.config.schema import SearchConfig
from swimclean.errors import TraversalError
from swimclean.logging import get_logger
from swimclean.report import Report
from swimclean.walker import walk

log = get_logger("runner")


def run(
    config: SearchConfig,
    *,
    dry_run: bool = False,
    confirm: ConfirmCallback | None = None,
    on_result: Callable[[CleanResult], None] | None = None,
    on_error: Callable[[TraversalError], None] | None = None,
) -> Report:
    """Clean every project under config.root and collect the outcomes.

    Per-project failures and unreadable directories are recorded in the
    report; nothing here aborts the run. KeyboardInterrupt propagates.
    """
    report = Report(root=config.root)

    def record_error(error: TraversalError) -> None:
        report.add_error(error)
        if on_error is not None:
            on_error(error)

    log.info("Searching in: %s", config.root)
    if config.skip:
        log.info("Skipping directories: %s", ", ".join(config.skip))

    for candidate in walk(config, on_error=record_error):
        result = clean(candidate, dry_run=dry_run, confirm=confirm)
        report.add(result)
        if on_result is not None:
            on_result(result)

    log.info(
        "Processed %d project(s), %d traversal error(s)",
        len(report.results),
        len(report.traversal_errors),
    )
    return report
