import textwrap

import pytest
from typer.testing import CliRunner

from microtest.cli import SuiteLoadError, app, load_suite

runner = CliRunner()


@pytest.fixture
def suite_file(tmp_path):
    """Helper that writes a suite file and returns its path."""

    def _write(body: str, name: str = "suite_file.py"):
        p = tmp_path / name
        p.write_text(textwrap.dedent(body))
        return p

    return _write


PASSING = """\
    from microtest import expect_equal, run_test_case, start_suite


    def suite(session):
        start_suite(session, "passing")
        run_test_case(session, lambda: expect_equal(session, 1 + 2, 3, "1+2 is 3"), "add")
"""

FAILING = """\
    from microtest import expect_equal, run_test_case, start_suite


    def suite(session):
        start_suite(session, "failing")
        run_test_case(session, lambda: expect_equal(session, 3 * 2, 7, "3*2 is 7"), "mul")
"""


def test_run_passing_suite(suite_file):
    path = suite_file(PASSING)
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 0
    assert "\npassing\n  add\n    ✓ 1+2 is 3\n\n  1 passing\n" in result.output


def test_run_failing_suite(suite_file):
    path = suite_file(FAILING)
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 1
    assert "✗ 3*2 is 7 (expected 7, got 6, in '" in result.output
    assert "0 passing, 1 failing" in result.output


def test_run_empty_suite_fails(suite_file):
    path = suite_file("""\
        from microtest import start_suite


        def suite(session):
            start_suite(session, "empty")
    """)
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 1
    assert "0 passing, 0 failing" in result.output


def test_run_missing_suite_file():
    result = runner.invoke(app, ["run", "nonexistent_suite.py"])
    assert result.exit_code == 2


def test_run_missing_entry(suite_file):
    path = suite_file("x = 1\n")
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 2


def test_run_suite_with_syntax_error(suite_file):
    path = suite_file("def suite(session)\n    pass\n")
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 2
    assert "cannot load suite file" in result.output


def test_run_suite_with_failing_import(suite_file):
    path = suite_file("import no_such_module_for_microtest\n")
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 2


def test_load_suite_wraps_import_errors(suite_file):
    path = suite_file("raise ImportError('missing dependency')\n")
    with pytest.raises(SuiteLoadError, match="missing dependency") as exc_info:
        load_suite(path)
    assert isinstance(exc_info.value.__cause__, ImportError)


def test_run_suite_defining_dataclasses(suite_file):
    path = suite_file("""\
        from __future__ import annotations

        from dataclasses import dataclass

        from microtest import expect_equal


        @dataclass
        class Pair:
            left: int
            right: int


        def suite(session):
            pair = Pair(2, 3)
            expect_equal(session, pair.left * pair.right, 6, "product")
    """, name="dataclass_suite.py")
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 0
    assert "    ✓ product" in result.output


def test_suite_can_import_neighbours_inside_entry(suite_file):
    suite_file("def triple(x):\n    return 3 * x\n", name="late_neighbour.py")
    path = suite_file("""\
        from microtest import expect_equal


        def suite(session):
            from late_neighbour import triple

            expect_equal(session, triple(3), 9, "triple")
    """)
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 0


def test_run_custom_entry(suite_file):
    path = suite_file("""\
        from microtest import record_pass


        def main(session):
            record_pass(session, "reached")
    """)
    result = runner.invoke(app, ["run", str(path), "--entry", "main"])
    assert result.exit_code == 0
    assert "    ✓ reached" in result.output


def test_run_verbose_prints_banner(suite_file):
    path = suite_file(PASSING)
    result = runner.invoke(app, ["run", str(path), "--verbose"])
    assert result.exit_code == 0
    assert result.output.startswith("Built with ")


def test_run_debug_banner_includes_extra_args(suite_file):
    path = suite_file(PASSING)
    result = runner.invoke(app, ["run", str(path), "-v", "--debug", "extra"])
    assert result.exit_code == 0
    assert f"argv[] = '{path}' 'extra'" in result.output


def test_run_with_config_file(suite_file, tmp_path):
    path = suite_file("""\
        from microtest import record_fail


        def suite(session):
            record_fail(session, "explicit failure")
    """)
    config = tmp_path / "microtest.yaml"
    config.write_text("strict_record_fail: true\nfail_glyph: X\n")

    result = runner.invoke(app, ["run", str(path), "--config", str(config)])
    assert result.exit_code == 1
    assert "    X explicit failure (in '" in result.output


def test_run_without_config_keeps_record_fail_quirk(suite_file):
    path = suite_file("""\
        from microtest import record_fail


        def suite(session):
            record_fail(session, "explicit failure")
    """)
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 0
    assert "1 passing" in result.output


def test_run_missing_config(suite_file):
    path = suite_file(PASSING)
    result = runner.invoke(app, ["run", str(path), "--config", "absent.yaml"])
    assert result.exit_code == 2


def test_run_invalid_config(suite_file, tmp_path):
    path = suite_file(PASSING)
    config = tmp_path / "bad.yaml"
    config.write_text("unknown_key: 1\n")
    result = runner.invoke(app, ["run", str(path), "--config", str(config)])
    assert result.exit_code == 2


def test_run_malformed_config(suite_file, tmp_path):
    path = suite_file(PASSING)
    config = tmp_path / "broken.yaml"
    config.write_text("verbose: [true\n")
    result = runner.invoke(app, ["run", str(path), "--config", str(config)])
    assert result.exit_code == 2
    assert "invalid config" in result.output


def test_run_writes_log_file(suite_file, tmp_path):
    path = suite_file(PASSING)
    log_file = tmp_path / "run.log"
    result = runner.invoke(app, ["run", str(path), "--log-file", str(log_file)])
    assert result.exit_code == 0
    assert "Running test case 'add'" in log_file.read_text()


def test_suite_can_import_its_neighbours(suite_file):
    suite_file("def triple(x):\n    return 3 * x\n", name="neighbour.py")
    path = suite_file("""\
        from microtest import expect_equal

        from neighbour import triple


        def suite(session):
            expect_equal(session, triple(2), 6, "triple")
    """)
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 0


def test_load_suite_rejects_non_callable_entry(suite_file):
    path = suite_file("suite = 42\n")
    with pytest.raises(SuiteLoadError, match="not callable"):
        load_suite(path)


def test_init_writes_example_suite(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--dir", "suites"])
    assert result.exit_code == 0
    assert (tmp_path / "suites" / "example_suite.py").exists()


def test_init_skips_existing_example(tmp_path):
    existing = tmp_path / "example_suite.py"
    existing.write_text("# mine\n")
    result = runner.invoke(app, ["init", "--dir", str(tmp_path)])
    assert result.exit_code == 0
    assert "skipping" in result.output
    assert existing.read_text() == "# mine\n"


def test_init_example_runs_green(tmp_path):
    runner.invoke(app, ["init", "--dir", str(tmp_path)])
    result = runner.invoke(app, ["run", str(tmp_path / "example_suite.py")])
    assert result.exit_code == 0
    assert "3 passing" in result.output
