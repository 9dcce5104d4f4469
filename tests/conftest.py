"""Shared fixtures for the ds-scaffold test suite.

Every test runs with the working directory and ``HOME`` pointed at
temporary directories, so no real config file or project is touched.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from ds_scaffold.helpers import helpers_logging
from ds_scaffold.scaffolding import Dependency, ProjectSpec

MakeSpec = Callable[..., ProjectSpec]
RunCli = Callable[..., int]


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Isolate cwd, HOME and config lookup; reset the quiet switch."""
    home = tmp_path / "home"
    workdir = tmp_path / "work"
    home.mkdir()
    workdir.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("DS_SCAFFOLD_CONFIG", raising=False)

    original_cwd = Path.cwd()
    os.chdir(workdir)
    helpers_logging.set_quiet(False)
    try:
        yield workdir
    finally:
        os.chdir(original_cwd)
        helpers_logging.set_quiet(False)


@pytest.fixture()
def target_dir(tmp_path: Path) -> Path:
    """Empty parent directory for generated projects."""
    target = tmp_path / "projects"
    target.mkdir()
    return target


@pytest.fixture()
def make_spec(target_dir: Path) -> MakeSpec:
    """Return a ProjectSpec factory with sensible defaults.

    Usage::

        spec = make_spec(name="churn", dependencies=(Dependency("pandas", "2.2.0"),))
    """

    def _make(
        name: str = "my-project",
        *,
        dependencies: tuple[Dependency, ...] = (),
        init_vcs: bool = False,
        overwrite: bool = False,
        author: str | None = None,
        target: Path | None = None,
    ) -> ProjectSpec:
        return ProjectSpec(
            name=name,
            target_dir=target or target_dir,
            init_vcs=init_vcs,
            dependencies=dependencies,
            overwrite=overwrite,
            author=author,
        )

    return _make


@pytest.fixture()
def run_cli() -> RunCli:
    """Return a helper that runs the ``ds-scaffold`` entry point in-process.

    Usage in tests::

        def test_create(run_cli: RunCli) -> None:
            assert run_cli("create", "my-project") == 0
    """
    from ds_scaffold.cli.commands import main

    def _run(*args: str) -> int:
        with patch.object(sys, "argv", ["ds-scaffold", *args]):
            return main()

    return _run
