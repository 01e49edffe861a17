from .result import (
    LoadFailure,
    MethodResult,
    ModuleResult,
    ModuleRun,
    ResultSummary,
    TestStatus,
    WorkerMessage,
    parse_message,
)

__all__ = [
    "LoadFailure",
    "MethodResult",
    "ModuleResult",
    "ModuleRun",
    "ResultSummary",
    "TestStatus",
    "WorkerMessage",
    "parse_message",
]
