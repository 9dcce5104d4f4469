"""Directory layout and ignore rules for data-science project scaffolds."""

from .types import DirectoryList, PatternList

# Ignore rules grouped by concern, rendered with one comment line per group.
GITIGNORE_SECTIONS: list[tuple[str, PatternList]] = [
    ("Python caches", ["__pycache__/", "*.py[cod]"]),
    ("Virtual environments", [".venv/"]),
    ("Secrets", [".env"]),
    ("Jupyter", [".ipynb_checkpoints/"]),
    ("Data (raw data is never edited in place; markers keep the folders)", [
        "data/raw/*",
        "data/processed/*",
        "!data/*/.gitkeep",
    ]),
    ("Regenerable results", ["results/*/*", "!results/*/.gitkeep"]),
    ("Editors and OS files", [".vscode/", ".idea/", ".DS_Store"]),
]

GITKEEP = ".gitkeep"


def get_scaffold_directories() -> DirectoryList:
    """Get list of directories to create in scaffold.

    Returns:
        List of directory paths relative to project root
    """
    return [
        "data/raw",
        "data/processed",
        "notebooks",
        "src",
        "results/figures",
        "results/tables",
    ]


def get_gitkeep_directories() -> DirectoryList:
    """Get directories that are empty right after scaffolding.

    ``src`` is excluded because it always receives ``__init__.py``.

    Returns:
        List of directory paths relative to project root
    """
    return [d for d in get_scaffold_directories() if d != "src"]


def get_gitignore_patterns() -> PatternList:
    """Get list of patterns for .gitignore.

    Returns:
        List of gitignore patterns in file order
    """
    return [pattern for _, patterns in GITIGNORE_SECTIONS for pattern in patterns]
