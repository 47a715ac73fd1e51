"""swim-clean-all - reclaim disk space from swim project build directories."""

from swimclean.cleaner import CleanOutcome, CleanResult, OutcomeKind, clean
from swimclean.config.schema import SearchConfig
from swimclean.report import Report
from swimclean.runner import run
from swimclean.walker import walk

__all__ = [
    "CleanOutcome",
    "CleanResult",
    "OutcomeKind",
    "Report",
    "SearchConfig",
    "clean",
    "run",
    "walk",
]

__version__ = "0.1.0"
