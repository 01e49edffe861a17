"""isotest - unit tests run in isolated worker processes."""

from .testing import LoadedModule, ResultSummary, Runner, TestCase, load_test_module, run
from .version import __version__


__all__ = [
    "LoadedModule",
    "ResultSummary",
    "Runner",
    "TestCase",
    "__version__",
    "load_test_module",
    "run",
]
