"""Console reporter for isotest output using Rich."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.text import Text
from rich.traceback import Traceback

from isotest.testing.models import TestStatus


if TYPE_CHECKING:
    from isotest.testing.models import LoadFailure, MethodResult, ModuleResult, ModuleRun, ResultSummary


_STATUS_CONFIG: dict[TestStatus, tuple[str, str]] = {
    TestStatus.PASSED: ("✔", "green"),
    TestStatus.FAILED: ("×", "red"),
    TestStatus.NO_ASSERTIONS: ("-", "yellow"),
}


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


class ConsoleReporter:
    """Writes module blocks and run summaries to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(file=sys.__stdout__)

    def _relative_path(self, path: Path, root: Path | None) -> str:
        if root is not None:
            try:
                return path.relative_to(root).as_posix()
            except ValueError:
                pass
        return path.as_posix()

    def _print_header(self, module: ModuleResult, path: str) -> None:
        count = len(module.results)
        self.console.print(
            f"[yellow]{escape(module.title)}[/yellow] ({count} {_plural(count, 'test', 'tests')}) "
            f"[dim]{escape(path)}[/dim]"
        )

    def _print_method_line(self, result: MethodResult) -> None:
        symbol, color = _STATUS_CONFIG[result.status]
        count = result.assertions
        self.console.print(
            f"    [{color}]{symbol}[/{color}] [cyan]{escape(result.display_name)}[/cyan] "
            f"({count} {_plural(count, 'assertion', 'assertions')})"
        )

    def _print_failures(self, failures: list[MethodResult]) -> None:
        self.console.print()
        self.console.print("[red]FAILED:[/red]")
        self.console.print()
        for result in failures:
            self.console.print(f"[red]{escape(result.display_name)}[/red] [dim]({escape(result.name)})[/dim]")
            if result.trace is not None:
                traceback = Traceback(result.trace, width=max(self.console.width - 4, 40), extra_lines=1)
                self.console.print(Padding(traceback, (0, 0, 0, 4)))
            self.console.print()

    def print_module(self, module: ModuleResult, path: Path, root: Path | None = None) -> None:
        """Print one TestCase class: header, a line per method, then failures."""
        self._print_header(module, self._relative_path(path, root))
        for result in module.results:
            self._print_method_line(result)
        failures = [r for r in module.results if r.status.is_failure]
        if failures:
            self._print_failures(failures)

    def print_module_run(self, run: ModuleRun, root: Path | None = None) -> None:
        for module in run.modules:
            self.print_module(module, run.path, root)
            self.console.print()

    def print_worker_output(self, output: str) -> None:
        """Replay the captured stdout of a worker process."""
        output = output.rstrip()
        if output:
            self.console.print(Text.from_ansi(output))
            self.console.print()

    def print_load_failure(self, path: Path, failure: LoadFailure) -> None:
        self.console.print(
            f"[red]ERROR {int(failure.error)}[/red] ({escape(str(path))}) - {escape(failure.message)}"
        )

    def print_message(self, message: str) -> None:
        self.console.print(escape(message))

    def print_summary(self, summary: ResultSummary) -> None:
        """Print the run-wide totals block."""
        self.console.print()
        self.console.print(f"Tests run         : [yellow]{summary.total}[/yellow]")
        self.console.print(f"Assertions passed : [green]{summary.passed}[/green]")
        self.console.print(f"Tests failed      : [red]{summary.failed}[/red]")
        self.console.print()

    def print_no_tests(self, tests_dir: Path) -> None:
        self.console.print(f"No test files found in directory [cyan]{escape(str(tests_dir))}[/cyan]")

    def print_no_directory(self, tests_dir: Path) -> None:
        self.console.print(f"Directory [cyan]{escape(str(tests_dir))}[/cyan] does not exist")
