"""Update existing project scaffolds."""

from pathlib import Path

from ds_scaffold.helpers.helpers_logging import print_info, print_success

from .errors import PermissionDeniedError, ScaffoldError
from .fs import ensure_dir, write_file
from .layout import GITKEEP, get_gitignore_patterns, get_gitkeep_directories, get_scaffold_directories
from .templates import (
    get_env_template,
    get_gitignore_template,
    get_readme_template,
    get_requirements_template,
    get_src_init_template,
)
from .types import ScaffoldResult

UPDATE_MARKER = "# Added by ds-scaffold --update"


def update_scaffold(project_root: Path, author: str | None = None) -> ScaffoldResult:
    """Bring an existing project in line with the current layout.

    This function updates:
    - Directory structure (adds missing directories, never removes)
    - .gitkeep markers in convention directories that are still empty
    - .gitignore (appends missing rules, preserves existing)
    - README.md, requirements.txt, .env, src/__init__.py (only if missing)

    It does NOT modify existing file content other than appending to .gitignore.

    Args:
        project_root: Root directory of the project
        author: Name for the Author section if README.md has to be created

    Returns:
        ScaffoldResult listing every created or modified path

    Raises:
        ScaffoldError: If project_root is not an existing directory
        PermissionDeniedError: If a directory or file cannot be written
    """
    if not project_root.is_dir():
        raise ScaffoldError(f"{project_root} is not an existing project directory")

    result = ScaffoldResult(root=project_root)
    print_info(f"🔄 Updating project scaffold in {project_root}...")

    # 1. Ensure all directories exist
    for directory in get_scaffold_directories():
        dir_path = project_root / directory
        if ensure_dir(dir_path):
            result.created_paths.append(dir_path)
            print_success(f"Created directory: {directory}/")

    # 2. Markers only where the directory has nothing else to keep it tracked
    for directory in get_gitkeep_directories():
        dir_path = project_root / directory
        if not dir_path.is_dir() or any(dir_path.iterdir()):
            continue
        gitkeep = dir_path / GITKEEP
        write_file(gitkeep, "")
        result.created_paths.append(gitkeep)
        print_success(f"Created: {directory}/{GITKEEP}")

    # 3. Missing template files
    name = project_root.resolve().name
    missing_files = {
        "src/__init__.py": get_src_init_template(name),
        "README.md": get_readme_template(author),
        "requirements.txt": get_requirements_template([]),
        ".env": get_env_template(name),
    }
    for relative_path, content in missing_files.items():
        file_path = project_root / relative_path
        if file_path.exists():
            continue
        write_file(file_path, content)
        result.created_paths.append(file_path)
        print_success(f"Created file: {relative_path}")

    # 4. .gitignore rules
    gitignore = _update_gitignore(project_root)
    if gitignore is not None:
        result.created_paths.append(gitignore)

    print_success("\n✅ Scaffold update complete!")
    return result


def _update_gitignore(project_root: Path) -> Path | None:
    """Append missing ignore rules to .gitignore.

    Args:
        project_root: Root directory of the project

    Returns:
        Path of .gitignore if it was created or changed, otherwise None
    """
    gitignore_path = project_root / ".gitignore"
    patterns = get_gitignore_patterns()

    if not gitignore_path.exists():
        write_file(gitignore_path, get_gitignore_template())
        print_success("Created .gitignore")
        return gitignore_path

    existing_content = gitignore_path.read_text(encoding="utf-8")
    existing_patterns = {
        line.strip()
        for line in existing_content.splitlines()
        if line.strip() and not line.startswith('#')
    }

    new_to_add = [p for p in patterns if p not in existing_patterns]
    if not new_to_add:
        print_info("⊘ .gitignore already up to date")
        return None

    block = "".join(f"{pattern}\n" for pattern in new_to_add)
    separator = "" if existing_content.endswith("\n") or not existing_content else "\n"
    try:
        with gitignore_path.open("a", encoding="utf-8") as f:
            f.write(f"{separator}\n{UPDATE_MARKER}\n{block}")
    except OSError as exc:
        raise PermissionDeniedError(gitignore_path, exc) from exc
    print_success(f"Added {len(new_to_add)} patterns to .gitignore")
    return gitignore_path
