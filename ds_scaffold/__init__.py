"""
ds-scaffold

Generates the standard directory layout for reproducible data-science
projects: raw/processed data folders, numbered notebooks, a src package,
results folders, README, pinned requirements and .gitignore.
"""

__version__ = "0.1.0"

from ds_scaffold.scaffolding import create_project, scaffold, update_scaffold

__all__ = [
    "create_project",
    "scaffold",
    "update_scaffold",
]
