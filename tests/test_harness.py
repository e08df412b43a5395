"""Tests for the sequential test harness."""

from __future__ import annotations

import io
import sys
import textwrap
from pathlib import Path

from fsf.harness import TestRunner, collect_tests, run_directory


def _boom() -> None:
    raise AssertionError("1 != 2")


class TestTestRunner:
    def test_pass_and_fail_output(self) -> None:
        out = io.StringIO()
        runner = TestRunner(out)
        assert runner.run_test(lambda: None, "first") is True
        assert runner.run_test(_boom, "second") is False
        assert runner.run_test(lambda: None, "third") is True
        assert out.getvalue() == "first... pass\nsecond... fail\nthird... pass\n"
        assert runner.passed == 2
        assert runner.failed_tests == ["second: 1 != 2"]

    def test_finish_reports_failures(self) -> None:
        out = io.StringIO()
        runner = TestRunner(out)
        runner.run_test(_boom, "t")
        assert runner.finish() == 1
        assert out.getvalue().endswith("t: 1 != 2\n")

    def test_finish_all_passed(self) -> None:
        out = io.StringIO()
        runner = TestRunner(out)
        runner.run_test(lambda: None, "t")
        assert runner.finish() == 0
        assert out.getvalue() == "t... pass\n"

    def test_error_without_message_uses_type_name(self) -> None:
        def fails() -> None:
            raise KeyError

        runner = TestRunner(io.StringIO())
        runner.run_test(fails, "k")
        assert runner.failed_tests == ["k: KeyError"]


def _write(path: Path, source: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source), encoding="utf-8")


class TestCollectTests:
    def test_collects_in_path_and_definition_order(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "b.py",
            """
            def test_zeta():
                pass

            def helper():
                pass

            def test_alpha():
                pass
            """,
        )
        _write(
            tmp_path / "a" / "pages.py",
            """
            from os.path import join as test_imported

            def test_index():
                pass
            """,
        )
        names = [name for name, _ in collect_tests(tmp_path)]
        assert names == ["a::pages::test_index", "b::test_zeta", "b::test_alpha"]

    def test_import_error_becomes_failing_test(self, tmp_path: Path) -> None:
        _write(tmp_path / "broken.py", "raise RuntimeError('bad module')\n")
        collected = list(collect_tests(tmp_path))
        assert [name for name, _ in collected] == ["broken::<import>"]
        runner = TestRunner(io.StringIO())
        assert runner.run_test(collected[0][1], collected[0][0]) is False
        assert runner.failed_tests == ["broken::<import>: bad module"]

    def test_single_file(self, tmp_path: Path) -> None:
        _write(tmp_path / "only.py", "def test_one():\n    pass\n")
        assert [n for n, _ in collect_tests(tmp_path / "only.py")] == ["only::test_one"]


class TestRunDirectory:
    def test_failures_do_not_stop_run(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "suite.py",
            """
            from fsf import MarkupBuilder

            def test_builds():
                b = MarkupBuilder()
                b.open("div").text("hi").close()
                assert b.finalize() == "<div>hi</div>"

            def test_crashes():
                raise ValueError("nope")

            def test_after_crash():
                assert MarkupBuilder().close().finalize() == ""
            """,
        )
        out = io.StringIO()
        assert run_directory(tmp_path, out) == 1
        assert out.getvalue() == (
            "suite::test_builds... pass\n"
            "suite::test_crashes... fail\n"
            "suite::test_after_crash... pass\n"
            "suite::test_crashes: nope\n"
        )

    def test_tests_import_sibling_modules(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "harness_site_pages.py",
            """
            def index(b):
                b.open("h1").text("Home").close()
            """,
        )
        _write(
            tmp_path / "test_pages.py",
            """
            from harness_site_pages import index
            from fsf import MarkupBuilder

            def test_index():
                b = MarkupBuilder()
                index(b)
                assert b.finalize() == "<h1>Home</h1>"
            """,
        )
        out = io.StringIO()
        assert run_directory(tmp_path, out) == 0
        assert out.getvalue() == "test_pages::test_index... pass\n"
        assert str(tmp_path.resolve()) not in sys.path

    def test_empty_directory_passes(self, tmp_path: Path) -> None:
        assert run_directory(tmp_path, io.StringIO()) == 0
