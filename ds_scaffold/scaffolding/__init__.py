"""Project scaffolding package for reproducible data-science projects.

Public API:
    scaffold: Create a project from plain arguments
    create_project: Create a project from a ProjectSpec
    build_plan: Compute the directory/file plan without touching disk
    update_scaffold: Add missing pieces to an existing project

Example:
    from ds_scaffold.scaffolding import scaffold

    result = scaffold("my-project", "/tmp", [("pandas", "2.2.0")])
    for path in result.created_paths:
        print(path)
"""

from .create import build_plan, create_project, scaffold
from .errors import (
    AlreadyExistsError,
    ConfigError,
    InvalidDependencyError,
    InvalidNameError,
    PermissionDeniedError,
    ScaffoldError,
    VersionControlError,
)
from .layout import get_gitignore_patterns, get_gitkeep_directories, get_scaffold_directories
from .templates import (
    get_env_template,
    get_gitignore_template,
    get_readme_template,
    get_requirements_template,
    get_src_init_template,
)
from .types import (
    Dependency,
    DirectoryPlan,
    ProjectSpec,
    ScaffoldResult,
    coerce_dependency,
    parse_dependency,
)
from .update import update_scaffold
from .validation import validate_project_name

__all__ = [
    # Main public API
    "scaffold",
    "create_project",
    "build_plan",
    "update_scaffold",
    "validate_project_name",
    # Errors
    "ScaffoldError",
    "InvalidNameError",
    "InvalidDependencyError",
    "AlreadyExistsError",
    "PermissionDeniedError",
    "VersionControlError",
    "ConfigError",
    # Templates and layout
    "get_readme_template",
    "get_requirements_template",
    "get_gitignore_template",
    "get_env_template",
    "get_src_init_template",
    "get_scaffold_directories",
    "get_gitkeep_directories",
    "get_gitignore_patterns",
    # Types
    "Dependency",
    "DirectoryPlan",
    "ProjectSpec",
    "ScaffoldResult",
    "coerce_dependency",
    "parse_dependency",
]
