import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest


ALPHA_BETA = """
    from isotest import TestCase


    class AlphaBetaTest(TestCase):
        def testAlpha(self):
            self.assert_equal(1, 1)

        def testBeta(self):
            self.assert_true(True)
            self.assert_equal("a", "a")
            raise RuntimeError("boom")
"""

ONE_PASSING = """
    from isotest import TestCase


    class {name}(TestCase):
        def testOne(self):
            self.assert_equal({value}, {value})
"""


@pytest.fixture
def write_module(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write dedented source to a file below ``tmp_path``."""

    def write(relative: str, source: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return write


@pytest.fixture
def project(tmp_path: Path, write_module: Callable[[str, str], Path]) -> Path:
    """A project root with a marker file and an empty tests directory."""
    write_module("pyproject.toml", '[project]\nname = "sample"\n')
    (tmp_path / "tests").mkdir()
    return tmp_path


@pytest.fixture
def alpha_beta() -> str:
    """Source of a module whose testBeta asserts twice, then raises."""
    return ALPHA_BETA


@pytest.fixture
def one_passing() -> Callable[..., str]:
    """Source of a module with one test making one assertion."""

    def source(name: str = "OnePassingTest", value: int = 1) -> str:
        return ONE_PASSING.format(name=name, value=value)

    return source
