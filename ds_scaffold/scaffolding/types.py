"""Type definitions for the scaffolding package."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidDependencyError, VersionControlError

DirectoryList = list[str]
"""List of directory paths relative to project root."""

PatternList = list[str]
"""List of gitignore patterns."""


@dataclass(frozen=True)
class Dependency:
    """A pinned requirement rendered as ``name==version``."""

    name: str
    version: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvalidDependencyError("Dependency name must not be empty")
        if not self.version.strip():
            raise InvalidDependencyError(
                f"Dependency '{self.name}' has an empty version string"
            )

    def pin(self) -> str:
        return f"{self.name.strip()}=={self.version.strip()}"


def parse_dependency(text: str) -> Dependency:
    """Parse a ``name==version`` string.

    Args:
        text: Requirement pin, e.g. ``pandas==2.2.0``

    Returns:
        Parsed Dependency

    Raises:
        InvalidDependencyError: If ``==`` is missing or either side is empty
    """
    if "==" not in text:
        raise InvalidDependencyError(
            f"Invalid dependency '{text}' (expected name==version)"
        )
    name, version = text.split("==", 1)
    return Dependency(name.strip(), version.strip())


def coerce_dependency(value: Dependency | tuple[str, str] | str) -> Dependency:
    """Accept a Dependency, a ``(name, version)`` pair or a ``name==version`` string."""
    if isinstance(value, Dependency):
        return value
    if isinstance(value, str):
        return parse_dependency(value)
    if isinstance(value, tuple) and len(value) == 2:
        name, version = value
        return Dependency(str(name), str(version))
    raise InvalidDependencyError(f"Unsupported dependency entry: {value!r}")


@dataclass(frozen=True)
class ProjectSpec:
    """Everything needed to scaffold one project."""

    name: str
    target_dir: Path
    init_vcs: bool = False
    dependencies: tuple[Dependency, ...] = ()
    overwrite: bool = False
    author: str | None = None

    @property
    def root(self) -> Path:
        return self.target_dir / self.name


@dataclass(frozen=True)
class DirectoryPlan:
    """Ordered directories followed by ordered ``(path, content)`` files.

    Paths are relative to the project root. Every directory appears before
    any file placed inside it.
    """

    directories: tuple[str, ...]
    files: tuple[tuple[str, str], ...]

    def relative_paths(self) -> list[str]:
        return [*self.directories, *(path for path, _ in self.files)]


@dataclass
class ScaffoldResult:
    """Outcome of a create or update run."""

    root: Path
    created_paths: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    vcs_error: VersionControlError | None = None

    @property
    def ok(self) -> bool:
        """True when no warnings were recorded."""
        return not self.warnings
