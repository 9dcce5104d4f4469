"""Git initialization for freshly scaffolded projects."""

import subprocess
from pathlib import Path

from .errors import VersionControlError

INITIAL_COMMIT_MESSAGE = "Initial project scaffold"


def _run_git(args: list[str], cwd: Path) -> None:
    """Run one git command, raising VersionControlError on any failure."""
    cmd = ["git", *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise VersionControlError("git executable not found", cmd) from exc
    except OSError as exc:
        raise VersionControlError(f"Could not run git: {exc}", cmd) from exc

    if result.returncode != 0:
        detail = (result.stderr or result.stdout).strip()
        raise VersionControlError(
            f"'{' '.join(cmd)}' failed with exit code {result.returncode}"
            + (f": {detail}" if detail else ""),
            cmd,
            result.stderr,
        )


def init_git_repo(project_root: Path) -> None:
    """Initialize a repository, stage the scaffold and create one commit.

    Staging uses ``git add --all`` so ignored entries such as ``.env`` are
    skipped instead of failing the add.

    Args:
        project_root: Root directory of the new project

    Raises:
        VersionControlError: On the first step that fails
    """
    _run_git(["init"], project_root)
    _run_git(["add", "--all"], project_root)
    _run_git(["commit", "-m", INITIAL_COMMIT_MESSAGE], project_root)
