from __future__ import annotations

import importlib.util
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType

import typer
import yaml

app = typer.Typer(name="microtest", help="Run minimal unit-test suites")


class SuiteLoadError(Exception):
    """A suite file could not be loaded or has no usable entry function."""


@contextmanager
def suite_search_path(path: Path) -> Iterator[None]:
    """Put the suite's directory on ``sys.path`` while the suite loads and runs."""
    suite_dir = str(path.parent.resolve())
    added = suite_dir not in sys.path
    if added:
        sys.path.insert(0, suite_dir)
    try:
        yield
    finally:
        if added:
            sys.path.remove(suite_dir)


def load_suite(path: Path, entry: str = "suite"):
    """Import the suite file at ``path`` and return its entry function.

    Modules next to the suite are importable only inside
    :func:`suite_search_path`.
    """
    if not path.is_file():
        raise SuiteLoadError(f"suite file not found: {path}")

    module_name = f"_microtest_suite_{path.stem.replace('-', '_')}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise SuiteLoadError(f"cannot load suite file: {path}")

    module: ModuleType = importlib.util.module_from_spec(spec)
    # dataclasses and typing resolve annotations through sys.modules
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        raise SuiteLoadError(f"cannot load suite file {path}: {e}") from e

    fn = getattr(module, entry, None)
    if fn is None:
        raise SuiteLoadError(f"{path} does not define '{entry}'")
    if not callable(fn):
        raise SuiteLoadError(f"'{entry}' in {path} is not callable")
    return fn


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def run(
    ctx: typer.Context,
    suite_file: str = typer.Argument(help="Path to a Python suite file"),
    config: str | None = typer.Option(None, help="Path to a harness YAML config"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print the build banner and log to stderr"
    ),
    debug: bool = typer.Option(False, "--debug", help="Also print the suite arguments"),
    log_file: str | None = typer.Option(None, help="Write debug log to this file"),
    entry: str = typer.Option("suite", help="Name of the suite entry function"),
):
    """Run a suite file and exit with its result."""
    from microtest.config import HarnessConfig, load_config
    from microtest.runner import run_suite
    from microtest.verbose import setup_logger

    try:
        harness_config = (
            load_config(Path(config)) if config is not None else HarnessConfig()
        )
    except FileNotFoundError:
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(2)
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid config {config}: {e}", err=True)
        raise typer.Exit(2)

    overrides: dict[str, object] = {}
    if verbose:
        overrides["verbose"] = True
    if debug:
        overrides["debug"] = True
    if log_file is not None:
        overrides["log_file"] = log_file
    harness_config = harness_config.model_copy(update=overrides)

    suite_path = Path(suite_file)
    with suite_search_path(suite_path):
        try:
            suite_fn = load_suite(suite_path, entry=entry)
        except SuiteLoadError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2)

        debug_file = (
            Path(harness_config.log_file) if harness_config.log_file else None
        )
        logger = setup_logger(debug_file=debug_file, verbose=harness_config.verbose)

        exit_code = run_suite(
            suite_fn,
            [str(suite_path), *ctx.args],
            config=harness_config,
            logger=logger,
        )
    raise typer.Exit(exit_code)


EXAMPLE_SUITE = '''\
"""Example microtest suite.

Run with:  microtest run example_suite.py
or:        python example_suite.py
"""

import sys

from microtest import (
    compute_result,
    expect_equal,
    expect_not_equal,
    expect_true,
    initialize,
    run_test_case,
    start_suite,
)


def suite(session):
    start_suite(session, "example_suite.py")

    def test_arithmetic():
        expect_equal(session, 1 + 2, 3, "1+2 is 3")
        expect_not_equal(session, 2 * 3, 7, "2*3 is not 7")

    def test_strings():
        expect_true(session, "micro" in "microtest", "substring found")

    run_test_case(session, test_arithmetic, "arithmetic")
    run_test_case(session, test_strings, "strings")


if __name__ == "__main__":
    session = initialize(sys.argv)
    suite(session)
    sys.exit(compute_result(session))
'''


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write the example suite in"),
):
    """Write an example suite file."""
    project_dir = Path(dir)

    if not project_dir.exists():
        project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "example_suite.py"
    if example.exists():
        typer.echo(f"example_suite.py already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_SUITE, encoding="utf-8")
    typer.echo(f"Wrote {example}")
    typer.echo(f"Run it with: microtest run {example}")


def main() -> None:
    app()
