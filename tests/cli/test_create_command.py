"""End-to-end tests for ``ds-scaffold create``.

Runs the real console entry point in-process with a patched ``sys.argv``.

Coverage
--------
- New project in cwd and in --target-dir
- --dep pins, --author, --git/--no-git, --overwrite, --dry-run, --quiet
- Config defaults and CLI overrides
- --update mode, with or without a project name; --update --dry-run is rejected
- Error paths (invalid name, duplicate, bad pin, bad config, missing name, unreadable root)
- Top-level help, aliases and unknown commands
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from ds_scaffold.scaffolding import VersionControlError

pytestmark = pytest.mark.cli

RunCli = Callable[..., int]


class TestCreate:
    def test_creates_project_in_current_directory(self, run_cli: RunCli, isolated_env: Path) -> None:
        assert run_cli("create", "churn-analysis") == 0

        root = isolated_env / "churn-analysis"
        assert (root / "data" / "raw" / ".gitkeep").is_file()
        assert (root / "README.md").is_file()

    def test_new_alias(self, run_cli: RunCli, isolated_env: Path) -> None:
        assert run_cli("new", "churn-analysis") == 0
        assert (isolated_env / "churn-analysis" / "src" / "__init__.py").is_file()

    def test_target_dir_and_pins(self, run_cli: RunCli, tmp_path: Path) -> None:
        code = run_cli(
            "create", "my-project",
            "--target-dir", str(tmp_path),
            "--dep", "pandas==2.2.0",
            "--dep", "numpy==1.26.3",
            "--author", "Ada",
        )

        assert code == 0
        root = tmp_path / "my-project"
        assert (root / "requirements.txt").read_text().splitlines() == [
            "pandas==2.2.0",
            "numpy==1.26.3",
        ]
        assert "Ada" in (root / "README.md").read_text()

    def test_summary_line(self, run_cli: RunCli, capsys: pytest.CaptureFixture[str]) -> None:
        run_cli("create", "my-project")

        assert "Created 17 paths under" in capsys.readouterr().out

    def test_quiet_prints_nothing_on_success(
        self, run_cli: RunCli, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert run_cli("create", "my-project", "--quiet") == 0
        assert capsys.readouterr().out == ""

    def test_dry_run_creates_nothing(
        self, run_cli: RunCli, isolated_env: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert run_cli("create", "my-project", "--dry-run") == 0

        assert not (isolated_env / "my-project").exists()
        output = capsys.readouterr().out
        assert "data/raw/" in output
        assert "requirements.txt" in output

    def test_git_flag_runs_vcs_step(self, run_cli: RunCli) -> None:
        with patch("ds_scaffold.scaffolding.create.init_git_repo") as mock_git:
            assert run_cli("create", "my-project", "--git") == 0

        mock_git.assert_called_once()

    def test_git_failure_still_exits_zero(
        self, run_cli: RunCli, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(
            "ds_scaffold.scaffolding.create.init_git_repo",
            side_effect=VersionControlError("git executable not found"),
        ):
            assert run_cli("create", "my-project", "--git") == 0

        assert "git executable not found" in capsys.readouterr().out


class TestCreateErrors:
    def test_invalid_name_exits_1(
        self, run_cli: RunCli, isolated_env: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert run_cli("create", "a/b") == 1

        assert list(isolated_env.iterdir()) == []
        assert "path separators" in capsys.readouterr().out

    def test_second_run_exits_1(self, run_cli: RunCli, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli("create", "my-project") == 0
        capsys.readouterr()

        assert run_cli("create", "my-project") == 1
        assert "already exists" in capsys.readouterr().out

    def test_overwrite_allows_second_run(self, run_cli: RunCli) -> None:
        assert run_cli("create", "my-project") == 0
        assert run_cli("create", "my-project", "--overwrite") == 0

    def test_bad_pin_exits_1_and_creates_nothing(self, run_cli: RunCli, isolated_env: Path) -> None:
        assert run_cli("create", "my-project", "--dep", "pandas") == 1
        assert not (isolated_env / "my-project").exists()

    def test_missing_name_is_an_argument_error(self, run_cli: RunCli) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli("create")

        assert exc_info.value.code == 2

    def test_unreadable_existing_root_exits_1(
        self, run_cli: RunCli, isolated_env: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        root = isolated_env / "my-project"
        root.mkdir()

        def _iterdir(self: Path) -> None:
            raise PermissionError(13, "Permission denied")

        with patch.object(Path, "iterdir", _iterdir):
            assert run_cli("create", "my-project") == 1

        assert f"Cannot access {root}: Permission denied" in capsys.readouterr().out

    def test_broken_config_exits_1(self, run_cli: RunCli, isolated_env: Path) -> None:
        (isolated_env / ".ds-scaffold.yaml").write_text("init_vcs: maybe\n")

        assert run_cli("create", "my-project") == 1


class TestConfigDefaults:
    def test_config_supplies_defaults(self, run_cli: RunCli, isolated_env: Path, tmp_path: Path) -> None:
        projects = tmp_path / "projects"
        (isolated_env / ".ds-scaffold.yaml").write_text(
            f"target_dir: {projects}\n"
            "author: Config Author\n"
            "dependencies:\n"
            "  pandas: '2.2.0'\n"
        )

        assert run_cli("create", "my-project", "--dep", "numpy==1.26.3") == 0

        root = projects / "my-project"
        assert (root / "requirements.txt").read_text() == "pandas==2.2.0\nnumpy==1.26.3\n"
        assert "Config Author" in (root / "README.md").read_text()

    def test_no_git_flag_overrides_config(self, run_cli: RunCli, isolated_env: Path) -> None:
        (isolated_env / ".ds-scaffold.yaml").write_text("init_vcs: true\n")

        with patch("ds_scaffold.scaffolding.create.init_git_repo") as mock_git:
            assert run_cli("create", "my-project", "--no-git") == 0

        mock_git.assert_not_called()

    def test_explicit_config_path(self, run_cli: RunCli, isolated_env: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("author: Explicit\n")

        assert run_cli("create", "my-project", "--config", str(config_file)) == 0
        assert "Explicit" in (isolated_env / "my-project" / "README.md").read_text()


class TestUpdate:
    def test_update_repairs_project(self, run_cli: RunCli, isolated_env: Path) -> None:
        run_cli("create", "my-project")
        root = isolated_env / "my-project"
        (root / "notebooks" / ".gitkeep").unlink()
        (root / "notebooks").rmdir()

        assert run_cli("create", "--update", "--target-dir", str(root)) == 0
        assert (root / "notebooks" / ".gitkeep").is_file()

    def test_update_defaults_to_cwd(
        self, run_cli: RunCli, isolated_env: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert run_cli("create", "--update") == 0

        assert (isolated_env / "data" / "raw").is_dir()
        assert "Scaffold update complete" in capsys.readouterr().out

    def test_update_missing_directory_exits_1(self, run_cli: RunCli, tmp_path: Path) -> None:
        assert run_cli("create", "--update", "--target-dir", str(tmp_path / "nope")) == 1

    def test_update_with_dry_run_is_rejected_and_writes_nothing(
        self, run_cli: RunCli, isolated_env: Path,
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli("create", "--update", "--dry-run")

        assert exc_info.value.code == 2
        assert list(isolated_env.iterdir()) == []

    def test_update_with_name_repairs_that_project(self, run_cli: RunCli, isolated_env: Path) -> None:
        assert run_cli("create", "proj") == 0
        root = isolated_env / "proj"
        (root / "notebooks" / ".gitkeep").unlink()
        (root / "notebooks").rmdir()

        assert run_cli("create", "proj", "--update") == 0

        assert (root / "notebooks" / ".gitkeep").is_file()
        assert not (isolated_env / "data").exists()
        assert not (isolated_env / ".env").exists()

    def test_update_with_name_and_target_dir(self, run_cli: RunCli, tmp_path: Path) -> None:
        parent = tmp_path / "projects"
        (parent / "proj").mkdir(parents=True)

        assert run_cli("create", "proj", "--update", "--target-dir", str(parent)) == 0
        assert (parent / "proj" / "src" / "__init__.py").is_file()

    def test_update_with_invalid_name_exits_1(self, run_cli: RunCli, isolated_env: Path) -> None:
        assert run_cli("create", "a/b", "--update") == 1
        assert list(isolated_env.iterdir()) == []


class TestTopLevel:
    def test_no_args_prints_help(self, run_cli: RunCli, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli() == 0
        assert "ds-scaffold <command>" in capsys.readouterr().out

    def test_help_command(self, run_cli: RunCli, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli("help") == 0
        assert "create" in capsys.readouterr().out

    def test_version(self, run_cli: RunCli, capsys: pytest.CaptureFixture[str]) -> None:
        from ds_scaffold import __version__

        assert run_cli("--version") == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_command(self, run_cli: RunCli) -> None:
        assert run_cli("destroy") == 2
