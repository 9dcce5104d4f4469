"""Create new project scaffolds."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ds_scaffold.helpers.helpers_logging import (
    print_header,
    print_info,
    print_success,
    print_warning,
)

from .errors import AlreadyExistsError, PermissionDeniedError, VersionControlError
from .fs import ensure_dir, write_file
from .layout import GITKEEP, get_gitkeep_directories, get_scaffold_directories
from .templates import (
    get_env_template,
    get_gitignore_template,
    get_readme_template,
    get_requirements_template,
    get_src_init_template,
)
from .types import Dependency, DirectoryPlan, ProjectSpec, ScaffoldResult, coerce_dependency
from .validation import validate_project_name
from .vcs import init_git_repo


def build_plan(spec: ProjectSpec) -> DirectoryPlan:
    """Derive the ordered directory and file plan for a project.

    Args:
        spec: Project to scaffold

    Returns:
        DirectoryPlan with paths relative to the project root
    """
    files: list[tuple[str, str]] = [
        (f"{directory}/{GITKEEP}", "") for directory in get_gitkeep_directories()
    ]
    files.extend([
        ("src/__init__.py", get_src_init_template(spec.name)),
        ("README.md", get_readme_template(spec.author)),
        ("requirements.txt", get_requirements_template(spec.dependencies)),
        (".gitignore", get_gitignore_template()),
        (".env", get_env_template(spec.name)),
    ])
    return DirectoryPlan(
        directories=tuple(get_scaffold_directories()),
        files=tuple(files),
    )


def _check_root(root: Path, overwrite: bool) -> None:
    """Refuse a root that is a file, or a non-empty directory without overwrite."""
    try:
        if not root.exists():
            return
        if not root.is_dir():
            raise AlreadyExistsError(root)
        if overwrite:
            return
        if any(root.iterdir()):
            raise AlreadyExistsError(root)
    except OSError as exc:
        raise PermissionDeniedError(root, exc) from exc


def create_project(spec: ProjectSpec) -> ScaffoldResult:
    """Create the directory tree and template files for a new project.

    Creates:
    - data/raw, data/processed, notebooks, src, results/figures, results/tables
    - .gitkeep markers in every directory that starts out empty
    - src/__init__.py, README.md, requirements.txt, .gitignore, .env
    - optionally a git repository with one initial commit

    Args:
        spec: Project to scaffold

    Returns:
        ScaffoldResult listing, in creation order, every directory that did
        not exist before and every file written. A failed git step is
        recorded in ``vcs_error`` and ``warnings``.

    Raises:
        InvalidNameError: Name is not filesystem safe (nothing is created)
        AlreadyExistsError: Root is present and non-empty without overwrite
        PermissionDeniedError: The root could not be inspected, or any
            directory or file could not be written
    """
    validate_project_name(spec.name)
    root = spec.root
    _check_root(root, spec.overwrite)

    plan = build_plan(spec)
    result = ScaffoldResult(root=root)

    print_header(f"📁 Scaffolding '{spec.name}' in {spec.target_dir}")

    if ensure_dir(root):
        result.created_paths.append(root)

    for directory in plan.directories:
        dir_path = root / directory
        if ensure_dir(dir_path):
            result.created_paths.append(dir_path)
            print_success(f"Created directory: {directory}/")

    for relative_path, content in plan.files:
        file_path = root / relative_path
        write_file(file_path, content)
        result.created_paths.append(file_path)
        print_success(f"Created file: {relative_path}")

    if spec.init_vcs:
        try:
            init_git_repo(root)
        except VersionControlError as exc:
            result.vcs_error = exc
            result.warnings.append(str(exc))
            print_warning(f"Version control setup failed: {exc}")
        else:
            print_success("Initialized git repository with initial commit")

    _print_next_steps(spec)
    return result


def scaffold(
    name: str,
    target_dir: Path | str | None = None,
    dependencies: Iterable[Dependency | tuple[str, str] | str] | None = None,
    init_vcs: bool = False,
    overwrite: bool = False,
    author: str | None = None,
) -> ScaffoldResult:
    """Scaffold a project from plain arguments.

    Args:
        name: Project directory name
        target_dir: Parent directory (default: current working directory)
        dependencies: Dependency objects, ``(name, version)`` pairs or
            ``name==version`` strings
        init_vcs: Initialize git and commit the scaffold
        overwrite: Allow writing into a non-empty existing root
        author: Name for the README Author section

    Returns:
        ScaffoldResult from create_project
    """
    validate_project_name(name)
    deps = tuple(coerce_dependency(dep) for dep in dependencies or ())
    spec = ProjectSpec(
        name=name,
        target_dir=Path(target_dir) if target_dir is not None else Path.cwd(),
        init_vcs=init_vcs,
        dependencies=deps,
        overwrite=overwrite,
        author=author,
    )
    return create_project(spec)


def _print_next_steps(spec: ProjectSpec) -> None:
    print_header(f"\n✅ Project scaffolding complete for '{spec.name}'!")
    print_info("\n📋 Next steps:")
    print_info(f"   1. cd {spec.root}")
    print_info("   2. python -m venv .venv && source .venv/bin/activate")
    print_info("   3. pip install -r requirements.txt")
    print_info("   4. Put source data in data/raw/ and start notebooks/01_*.ipynb")
