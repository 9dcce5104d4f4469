#!/usr/bin/env python3
"""
Scaffold a new data-science project.

Creates data/raw, data/processed, notebooks, src, results/figures and
results/tables, plus README.md, requirements.txt, .gitignore, .env and
.gitkeep markers.

Usage:
    # New project in the current directory
    ds-scaffold create churn-analysis

    # Pinned dependencies, git repository, custom parent directory
    ds-scaffold create churn-analysis \\
        --target-dir ~/projects \\
        --dep pandas==2.2.0 --dep numpy==1.26.3 \\
        --git

    # Show what would be created
    ds-scaffold create churn-analysis --dry-run

    # Add missing folders/markers/ignore rules to an existing project
    ds-scaffold create --update --target-dir ~/projects/churn-analysis
    ds-scaffold create churn-analysis --update --target-dir ~/projects
"""

import argparse
import sys
from pathlib import Path

# When executed directly, ensure the project root is on sys.path
if __package__ in (None, ""):
    project_root = Path(__file__).resolve().parents[2]
    sys.path.insert(0, str(project_root))

from ds_scaffold.helpers.config_loader import ScaffoldConfig, load_config
from ds_scaffold.helpers.helpers_logging import (
    print_error,
    print_header,
    print_info,
    print_success,
    set_quiet,
)
from ds_scaffold.scaffolding import (
    Dependency,
    ProjectSpec,
    ScaffoldError,
    build_plan,
    create_project,
    parse_dependency,
    update_scaffold,
    validate_project_name,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``ds-scaffold create``."""
    parser = argparse.ArgumentParser(
        prog="ds-scaffold create",
        description="Scaffold a reproducible data-science project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ds-scaffold create churn-analysis
  ds-scaffold create churn-analysis --dep pandas==2.2.0 --dep numpy==1.26.3 --git
  ds-scaffold create --update --target-dir ./churn-analysis
  ds-scaffold create churn-analysis --update

Defaults can be set in .ds-scaffold.yaml, ~/.config/ds-scaffold/config.yaml
or the file named by $DS_SCAFFOLD_CONFIG. Command-line flags win.
        """,
    )

    parser.add_argument(
        "name",
        nargs="?",  # Optional when using --update
        help="Project directory name (e.g., 'churn-analysis')",
    )
    parser.add_argument(
        "--target-dir",
        type=Path,
        help="Parent directory for the project (default: current directory). "
             "With --update and no name: the project directory itself.",
    )
    parser.add_argument(
        "--dep",
        action="append",
        default=[],
        metavar="NAME==VERSION",
        help="Pinned dependency for requirements.txt (repeatable)",
    )
    parser.add_argument(
        "--git",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Initialize a git repository and commit the scaffold",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Write into an existing non-empty directory (template files are replaced)",
    )
    parser.add_argument("--author", help="Author name for README.md")
    parser.add_argument("--config", type=Path, help="Path to a YAML defaults file")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the planned directories and files without creating anything",
    )
    parser.add_argument(
        "--update",
        action="store_true",
        help="Add missing directories, .gitkeep markers, template files and "
             ".gitignore rules to an existing project. Existing files are kept.",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print warnings and errors")
    return parser


def _collect_dependencies(config: ScaffoldConfig, cli_deps: list[str]) -> tuple[Dependency, ...]:
    """Config dependencies first, then --dep flags in the order given."""
    return (*config.dependencies, *(parse_dependency(dep) for dep in cli_deps))


def _print_plan(spec: ProjectSpec) -> None:
    plan = build_plan(spec)
    print_header(f"📋 Plan for {spec.root} (dry run, nothing created)")
    for directory in plan.directories:
        print_info(f"  {directory}/")
    for relative_path, _content in plan.files:
        print_info(f"  {relative_path}")


def _run_update(args: argparse.Namespace, config: ScaffoldConfig) -> int:
    if args.name:
        validate_project_name(args.name)
        project_root = (args.target_dir or config.target_dir or Path.cwd()) / args.name
    else:
        project_root = args.target_dir or Path.cwd()
    result = update_scaffold(project_root, author=args.author or config.author)
    if not result.created_paths:
        print_info("⊘ Nothing to update")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the create command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    set_quiet(args.quiet)
    if args.update and args.dry_run:
        parser.error("--dry-run cannot be combined with --update")

    try:
        config = load_config(args.config)

        if args.update:
            return _run_update(args, config)

        if not args.name:
            parser.error("the following arguments are required: name")

        validate_project_name(args.name)
        spec = ProjectSpec(
            name=args.name,
            target_dir=args.target_dir or config.target_dir or Path.cwd(),
            init_vcs=config.init_vcs if args.git is None else args.git,
            dependencies=_collect_dependencies(config, args.dep),
            overwrite=args.overwrite,
            author=args.author or config.author,
        )

        if args.dry_run:
            _print_plan(spec)
            return 0

        result = create_project(spec)
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1

    print_success(f"Created {len(result.created_paths)} paths under {result.root}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
