"""Tests for isotest.worker module."""

from rich.console import Console

from isotest.config import Settings
from isotest.testing.channel import WorkerChannel
from isotest.testing.models import LoadFailure, ResultSummary
from isotest.testing.outcomes import LoadError
from isotest.worker import main, run_worker


class RecordingChannel(WorkerChannel):
    def __init__(self):
        super().__init__()
        self.messages = []

    def send(self, message):
        super().send(message)
        self.messages.append(message)


def recording_console() -> Console:
    return Console(record=True, width=120, force_terminal=False)


class TestRunWorker:
    def test_runs_module_and_sends_summary(self, project, write_module, alpha_beta):
        path = write_module("tests/alpha.py", alpha_beta)
        channel = RecordingChannel()
        console = recording_console()

        message = run_worker([str(path)], console=console, channel=channel, settings=Settings())

        assert message == ResultSummary(total=2, passed=3, failed=1)
        assert channel.messages == [message]
        output = console.export_text()
        assert "AlphaBetaTest (2 tests)" in output
        assert "RuntimeError: boom" in output

    def test_usage_error(self):
        channel = RecordingChannel()

        message = run_worker([], console=recording_console(), channel=channel, settings=Settings())

        assert isinstance(message, LoadFailure)
        assert message.error is LoadError.USAGE
        assert channel.messages == [message]

    def test_too_many_arguments(self):
        message = run_worker(["a.py", "b.py"], console=recording_console(), channel=RecordingChannel())
        assert message.error is LoadError.USAGE

    def test_load_failure_is_sent(self, project, write_module):
        path = write_module("tests/plain.py", "VALUE = 1\n")
        channel = RecordingChannel()

        message = run_worker([str(path)], console=recording_console(), channel=channel, settings=Settings())

        assert isinstance(message, LoadFailure)
        assert message.error is LoadError.WRONG_CONTRACT
        assert channel.messages == [message]

    def test_import_failure_is_sent(self, project, write_module):
        path = write_module("tests/broken.py", "raise ImportError('nope')\n")

        message = run_worker([str(path)], console=recording_console(), channel=RecordingChannel())

        assert message.error is LoadError.IMPORT_FAILED
        assert "nope" in message.message


class TestMain:
    def test_exit_code_for_usage(self, monkeypatch):
        monkeypatch.delenv("ISOTEST_CHANNEL_FD", raising=False)
        assert main([]) == 2

    def test_exit_code_for_passing_module(self, monkeypatch, project, write_module, one_passing):
        monkeypatch.delenv("ISOTEST_CHANNEL_FD", raising=False)
        path = write_module("tests/one.py", one_passing())
        assert main([str(path)]) == 0

    def test_exit_code_for_failing_module(self, monkeypatch, project, write_module, alpha_beta):
        monkeypatch.delenv("ISOTEST_CHANNEL_FD", raising=False)
        path = write_module("tests/alpha.py", alpha_beta)
        assert main([str(path)]) == 1
