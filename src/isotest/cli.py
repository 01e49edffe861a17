from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from isotest.config import Settings
from isotest.reports.console import ConsoleReporter
from isotest.scaffold.generator import scaffold
from isotest.testing.runner import Runner, RunStatus
from isotest.version import __version__
from isotest.worker import main as worker_main


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NO_DIRECTORY = 4
EXIT_NO_TESTS = 5


class CLIApplication:
    """Top-level command router."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.parser = argparse.ArgumentParser(
            prog="isotest",
            description="Run unit tests, one isolated process per test module.",
        )
        self.parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        self.parser.add_argument(
            "-v",
            "--verbose",
            action="count",
            default=0,
            help="Log more (-v info, -vv debug).",
        )
        subparsers = self.parser.add_subparsers(dest="command", required=True)

        run = subparsers.add_parser("run", help="Discover and run every test module of a project.")
        run.add_argument(
            "directory",
            nargs="?",
            default=None,
            help="Directory to start searching for the project root (default: cwd).",
        )
        run.add_argument("--timeout", type=float, help="Kill a worker after this many seconds.")
        run.add_argument("--jobs", "-j", type=int, help="Maximum concurrent workers (0 = one per module).")
        run.add_argument("--tests-dir", dest="tests_dir", help="Tests directory below the project root.")
        run.add_argument("--marker", dest="marker_file", help="File marking the project root.")

        worker = subparsers.add_parser("worker", help="Run a single test module in this process.")
        worker.add_argument("paths", nargs="*", metavar="path", help="Test module file.")

        create = subparsers.add_parser("create", help="Generate stub test modules for source files.")
        create.add_argument("sources", nargs="+", metavar="source", help="Python source file.")
        create.add_argument("--marker", dest="marker_file", help="File marking the project root.")
        create.add_argument("--tests-dir", dest="tests_dir", help="Tests directory below the project root.")

    def _configure_logging(self, verbosity: int) -> None:
        level = logging.WARNING
        if verbosity == 1:
            level = logging.INFO
        elif verbosity > 1:
            level = logging.DEBUG
        logging.basicConfig(
            level=level,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            force=True,
        )

    def run(self, argv: Sequence[str] | None = None) -> int:
        load_dotenv(Path.cwd() / ".env")
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)
        if args.command == "worker":
            return worker_main(args.paths)
        if args.command == "create":
            return CreateCommand(self.console, args).run()
        return RunCommand(self.console, args).run()


def _settings(args: argparse.Namespace, *names: str) -> Settings:
    overrides = {name: getattr(args, name) for name in names if getattr(args, name, None) is not None}
    return Settings(**overrides)


class RunCommand:
    """Driver for `isotest run`."""

    def __init__(self, console: Console, args: argparse.Namespace) -> None:
        self.console = console
        self.directory = args.directory
        self.settings = _settings(args, "timeout", "jobs", "tests_dir", "marker_file")

    def run(self) -> int:
        runner = Runner(self.console, settings=self.settings)
        suite_run = asyncio.run(runner.run(self.directory))
        if suite_run.status is RunStatus.NO_DIRECTORY:
            return EXIT_NO_DIRECTORY
        if suite_run.status is RunStatus.NO_TESTS:
            return EXIT_NO_TESTS
        return EXIT_OK if suite_run.ok else EXIT_FAILED


class CreateCommand:
    """Driver for `isotest create`."""

    def __init__(self, console: Console, args: argparse.Namespace) -> None:
        self.reporter = ConsoleReporter(console)
        self.sources = args.sources
        self.settings = _settings(args, "tests_dir", "marker_file")

    def run(self) -> int:
        status = EXIT_OK
        for source in self.sources:
            result = scaffold(source, marker=self.settings.marker_file, tests_dir=self.settings.tests_dir)
            if result.written:
                self.reporter.console.print(f"[green]Created[/green] {result.output}")
                continue
            status = EXIT_FAILED
            if result.reason:
                self.reporter.print_message(result.reason)
            if result.code:
                self.reporter.console.print(result.code, markup=False, highlight=False)
        return status


def main(argv: Sequence[str] | None = None) -> int:
    return CLIApplication().run(argv)


if __name__ == "__main__":
    raise SystemExit(main())
