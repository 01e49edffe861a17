"""Discovery, loading and isolated execution of test modules."""

from .case import TestCase
from .discovery import find_project_root, iter_candidates
from .executor import ModuleExecutor
from .loader import LoadedModule, TestModule, load_test_module
from .models import LoadFailure, MethodResult, ModuleResult, ModuleRun, ResultSummary, TestStatus
from .outcomes import LoadError
from .runner import Runner, RunStatus, SuiteRun, WorkerRun, run


__all__ = [
    "LoadError",
    "LoadFailure",
    "LoadedModule",
    "MethodResult",
    "ModuleExecutor",
    "ModuleResult",
    "ModuleRun",
    "ResultSummary",
    "RunStatus",
    "Runner",
    "SuiteRun",
    "TestCase",
    "TestModule",
    "TestStatus",
    "WorkerRun",
    "find_project_root",
    "iter_candidates",
    "load_test_module",
    "run",
]
