"""Sequential, crash-recovering test harness.

Runs test callables one after another. A test passes if it returns and
fails if it raises; a failure is recorded and the run continues. Output
matches the runner the project has always used::

    pages::test_index... pass
    pages::test_about... fail
    pages::test_about: expected '<p>'

Example:
    >>> import io
    >>> runner = TestRunner(io.StringIO())
    >>> runner.run_test(lambda: None, "ok")
    True
    >>> runner.finish()
    0
"""

from __future__ import annotations

import importlib.util
import inspect
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import TextIO

from fsf.utils.logger import get_logger

logger = get_logger(__name__)

TestFunction = Callable[[], object]

TEST_PREFIX = "test_"


class TestRunner:
    """Runs tests in order and collects failures.

    Not a pytest test class.
    """

    __test__ = False

    __slots__ = ("_stream", "failed_tests", "passed")

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.failed_tests: list[str] = []
        self.passed = 0

    def run_test(self, test: TestFunction, name: str) -> bool:
        """Run one test, recording a failure instead of propagating it.

        Args:
            test: Zero-argument callable
            name: Name printed before the result

        Returns:
            True if the test passed
        """
        self._stream.write(f"{name}...")
        self._stream.flush()
        try:
            test()
        except Exception as e:
            logger.debug("Test %s failed", name, exc_info=True)
            self.failed_tests.append(f"{name}: {_describe(e)}")
            self._stream.write(" fail\n")
            return False
        self.passed += 1
        self._stream.write(" pass\n")
        return True

    def finish(self) -> int:
        """Print recorded failures and return the exit status."""
        for failure in self.failed_tests:
            self._stream.write(f"{failure}\n")
        self._stream.flush()
        return 1 if self.failed_tests else 0


def _describe(e: BaseException) -> str:
    message = str(e)
    return message if message else type(e).__name__


def _module_name(path: Path, root: Path) -> str:
    return "::".join(path.relative_to(root).with_suffix("").parts)


def _import_file(path: Path, name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[name]
        raise
    return module


def collect_tests(root: Path | str) -> Iterator[tuple[str, TestFunction]]:
    """Yield ``("module::test_name", callable)`` for every test under root.

    Modules are visited in sorted path order and tests in definition
    order. A module that fails to import yields a single test that
    re-raises the import error, so it is reported as a failure.

    root is on sys.path until the iterator is exhausted, so test files
    can import modules that sit next to them.

    Args:
        root: Directory (or single file) to search for ``*.py`` files
    """
    root = Path(root)
    if root.is_file():
        files = [root]
        root = root.parent
    else:
        files = sorted(root.rglob("*.py"))

    # Sibling modules stay importable while the yielded tests run.
    with _on_sys_path(root):
        for path in files:
            module_name = _module_name(path, root)
            import_name = "_fsf_tests." + module_name.replace("::", ".")
            try:
                module = _import_file(path, import_name)
            except Exception as e:
                logger.debug("Could not import %s", path, exc_info=True)
                yield f"{module_name}::<import>", _reraise(e)
                continue

            for attr, value in vars(module).items():
                if (
                    attr.startswith(TEST_PREFIX)
                    and inspect.isfunction(value)
                    and value.__module__ == import_name
                ):
                    yield f"{module_name}::{attr}", value


@contextmanager
def _on_sys_path(directory: Path) -> Iterator[None]:
    entry = str(directory.resolve())
    sys.path.insert(0, entry)
    try:
        yield
    finally:
        try:
            sys.path.remove(entry)
        except ValueError:
            pass


def _reraise(error: Exception) -> TestFunction:
    def fail() -> None:
        raise error

    return fail


def run_directory(root: Path | str, stream: TextIO | None = None) -> int:
    """Collect and run every test under root.

    Returns:
        Exit status: 0 if all passed, 1 otherwise
    """
    runner = TestRunner(stream)
    count = 0
    for name, test in collect_tests(root):
        runner.run_test(test, name)
        count += 1
    if count == 0:
        logger.warning("No tests found under %s", root)
    return runner.finish()


__all__ = [
    "TestRunner",
    "collect_tests",
    "run_directory",
]
