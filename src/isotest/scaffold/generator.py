"""Generation of stub test modules from the classes of a source file."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from string import Template

from isotest.testing.discovery import find_project_root
from isotest.testing.loader import import_file


logger = logging.getLogger(__name__)

STATIC_PREFIX = "static_"


def _template(name: str) -> Template:
    return Template(resources.files("isotest.scaffold").joinpath("templates", name).read_text(encoding="utf-8"))


@dataclass(frozen=True)
class MethodStub:
    """A method of the class under test and the test that covers it."""

    method: str
    static: bool

    @property
    def test(self) -> str:
        return f"test_{STATIC_PREFIX if self.static else ''}{self.method}"


@dataclass
class ClassStub:
    name: str
    title: str
    methods: list[MethodStub] = field(default_factory=list)


def public_methods(cls: type) -> list[MethodStub]:
    """Public methods declared on ``cls``, sorted by their test name."""
    stubs = []
    for name, value in vars(cls).items():
        if name.startswith("_"):
            continue
        if isinstance(value, (staticmethod, classmethod)):
            stubs.append(MethodStub(method=name, static=True))
        elif inspect.isfunction(value):
            stubs.append(MethodStub(method=name, static=False))
    return sorted(stubs, key=lambda stub: stub.test)


def module_path(source: Path, root: Path) -> str:
    """Dotted import path of ``source`` relative to ``root`` (``src/`` dropped)."""
    parts = list(source.relative_to(root).with_suffix("").parts)
    if parts and parts[0] == "src":
        parts = parts[1:]
    return ".".join(parts)


def output_path(source: Path, root: Path, tests_dir: str = "tests") -> Path:
    """Where the stub for ``source`` goes: its path below ``tests_dir``."""
    relative = source.relative_to(root)
    if relative.parts and relative.parts[0] == "src":
        relative = Path(*relative.parts[1:])
    return root / tests_dir / relative


def render(module: str, classes: list[ClassStub]) -> str:
    """Source code of a test module covering ``classes``."""
    method_tpl = _template("method.py.tmpl")
    class_tpl = _template("class.py.tmpl")
    rendered = []
    for stub in classes:
        methods = "\n\n".join(
            method_tpl.substitute(
                test=method.test,
                target=stub.name if method.static else "self.sut",
                method=method.method,
            ).rstrip()
            for method in stub.methods
        )
        rendered.append(class_tpl.substitute(name=stub.name, title=stub.title, methods=methods).rstrip())

    code = _template("module.py.tmpl").substitute(
        module=module,
        names=", ".join(stub.name for stub in classes),
        classes="\n\n\n".join(rendered),
    )
    return code.rstrip() + "\n"


@dataclass
class ScaffoldResult:
    """Outcome of generating the stub for one source file."""

    source: Path
    output: Path | None = None
    code: str | None = None
    written: bool = False
    reason: str | None = None


def scaffold(
    filename: Path | str,
    *,
    marker: str = "pyproject.toml",
    tests_dir: str = "tests",
) -> ScaffoldResult:
    """Write a stub test module for the public classes of ``filename``.

    An existing test file is never overwritten; the rendered code is
    returned instead.
    """
    source = Path(filename).resolve()
    result = ScaffoldResult(source=source)
    if not source.is_file():
        result.reason = f"File not found: {filename}"
        return result

    root = find_project_root(source.parent, marker)
    search_paths = [root]
    if (root / "src").is_dir():
        search_paths.append(root / "src")
    try:
        module = import_file(source, search_paths)
    except (Exception, SystemExit) as e:
        logger.debug("Importing %s failed", source, exc_info=True)
        result.reason = f"Error importing {filename}: {type(e).__name__}: {e}"
        return result

    dotted = module_path(source, root)
    classes = [
        ClassStub(name=name, title=f"{dotted}.{name}", methods=public_methods(obj))
        for name, obj in vars(module).items()
        if inspect.isclass(obj) and obj.__module__ == module.__name__ and not name.startswith("_")
    ]
    classes = [stub for stub in classes if stub.methods]
    if not classes:
        result.reason = f"No methods to test in {filename}"
        return result

    result.output = output_path(source, root, tests_dir)
    result.code = render(dotted, classes)
    if result.output.exists():
        result.reason = f"{result.output} already exists"
        return result

    result.output.parent.mkdir(parents=True, exist_ok=True)
    result.output.write_text(result.code, encoding="utf-8")
    result.written = True
    logger.info("Wrote %s", result.output)
    return result
