"""Template generation functions for project scaffolding."""

from collections.abc import Sequence

from .layout import GITIGNORE_SECTIONS
from .types import Dependency

README_SECTIONS = [
    "# Project Title",
    "## Data",
    "## Methods",
    "## Results",
    "## Reproduction",
    "## Author",
]


def get_readme_template(author: str | None = None) -> str:
    """Generate README.md template.

    The section headers are fixed placeholders and appear in a fixed order
    so every project generated from the convention reads the same way.

    Args:
        author: Name for the Author section (placeholder text when None)

    Returns:
        Complete README.md content as string
    """
    author_line = author or "Your name and contact details."

    return f"""# Project Title

One-sentence description of the question this project answers.

## Data

Where the data comes from, its license, and how to obtain it.
Files in `data/raw/` are never edited in place; every transformation
writes to `data/processed/`.

## Methods

Summary of the analysis. Notebooks in `notebooks/` are numbered in the
order they should be run (`01_explore.ipynb`, `02_clean.ipynb`, ...).
Reusable code lives in `src/`.

## Results

Key findings. Figures go to `results/figures/` and tables to
`results/tables/`; both can be regenerated from the notebooks.

## Reproduction

```bash
python -m venv .venv
source .venv/bin/activate
pip install -r requirements.txt
```

Then run the notebooks in numeric order.

## Author

{author_line}
"""


def get_requirements_template(dependencies: Sequence[Dependency]) -> str:
    """Generate requirements.txt with one ``name==version`` pin per line.

    Args:
        dependencies: Pinned dependencies in the order they should appear

    Returns:
        requirements.txt content (empty string when there are no pins)
    """
    if not dependencies:
        return ""
    return "\n".join(dep.pin() for dep in dependencies) + "\n"


def get_gitignore_template() -> str:
    """Generate .gitignore template.

    Returns:
        Complete .gitignore content as string
    """
    blocks = [
        "\n".join([f"# {title}", *patterns])
        for title, patterns in GITIGNORE_SECTIONS
    ]
    return "\n\n".join(blocks) + "\n"


def get_env_template(project_name: str) -> str:
    """Generate the .env stub. It is git-ignored and meant for local secrets."""
    return f"""# Local environment variables for {project_name}.
# This file is ignored by git. Do not commit credentials.
#
# DATA_URL=
# API_TOKEN=
"""


def get_src_init_template(project_name: str) -> str:
    return f'''"""Source package for {project_name}.

Put reusable data loading, cleaning and feature code here and import it
from the notebooks. Raw inputs are read from ``data/raw`` and derived
outputs are written to ``data/processed``.
"""
'''
