"""Exceptions raised by the scaffolder."""

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every scaffolding failure."""


class InvalidNameError(ScaffoldError):
    """Project name is empty or not safe to use as a directory name."""


class InvalidDependencyError(ScaffoldError):
    """Dependency entry is not a usable ``name==version`` pin."""


class AlreadyExistsError(ScaffoldError):
    """Project root is present and non-empty, and overwrite was not requested."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"{path} already exists and is not empty (use --overwrite to write into it)"
        )
        self.path = path


class PermissionDeniedError(ScaffoldError):
    """Filesystem access failed while creating or updating the scaffold."""

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot access {path}: {reason}")
        self.path = path
        self.cause = cause


class VersionControlError(ScaffoldError):
    """Git initialization or the initial commit failed.

    Never raised out of ``create_project``; it is attached to the result
    instead because the filesystem tree is the primary deliverable.
    """

    def __init__(self, message: str, command: list[str] | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.command = command or []
        self.stderr = stderr


class ConfigError(ScaffoldError):
    """The defaults file could not be read or has the wrong shape."""
