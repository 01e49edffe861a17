"""Worker process: runs one test module and reports back.

Usage:
    python -m isotest.worker tests/calculator.py
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from isotest.config import Settings
from isotest.reports.console import ConsoleReporter
from isotest.testing.channel import WorkerChannel
from isotest.testing.discovery import find_project_root
from isotest.testing.executor import ModuleExecutor
from isotest.testing.loader import LoadedModule, load_test_module
from isotest.testing.models import LoadFailure, ResultSummary
from isotest.testing.outcomes import LoadError


def _fallback(reporter: ConsoleReporter):
    def show(message: LoadFailure | ResultSummary) -> None:
        if isinstance(message, LoadFailure):
            reporter.print_message(message.message)
        else:
            reporter.print_summary(message)

    return show


def run_worker(
    argv: Sequence[str],
    console: Console | None = None,
    channel: WorkerChannel | None = None,
    settings: Settings | None = None,
) -> LoadFailure | ResultSummary:
    """Load, run and report the single test module named in ``argv``."""
    reporter = ConsoleReporter(console or Console())
    channel = channel or WorkerChannel.from_environ(fallback=_fallback(reporter))
    settings = settings or Settings()

    if len(argv) != 1:
        message: LoadFailure | ResultSummary = LoadFailure(
            error=LoadError.USAGE,
            message="Expected exactly one argument: the path of a test module",
        )
        channel.send(message)
        return message

    path = Path(argv[0])
    root = find_project_root(path.resolve().parent, settings.marker_file)
    outcome = load_test_module(path, root=root, private_prefix=settings.private_prefix)
    if not isinstance(outcome, LoadedModule):
        channel.send(outcome)
        return outcome

    module_run = asyncio.run(ModuleExecutor(outcome).run())
    reporter.print_module_run(module_run, root)
    message = module_run.summary
    channel.send(message)
    return message


def main(argv: Sequence[str] | None = None) -> int:
    message = run_worker(sys.argv[1:] if argv is None else argv)
    if isinstance(message, LoadFailure):
        return 2 if message.error is LoadError.USAGE else 1
    return 1 if message.failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
