"""Optional YAML defaults for ds-scaffold.

Lookup order (first existing file wins):
    1. explicit path (``--config``)
    2. ``$DS_SCAFFOLD_CONFIG``
    3. ``./.ds-scaffold.yaml``
    4. ``~/.config/ds-scaffold/config.yaml``

Example file::

    target_dir: ~/projects
    init_vcs: true
    author: Jane Doe
    dependencies:
      pandas: "2.2.0"
      numpy: "1.26.3"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

import yaml

from ds_scaffold.scaffolding.errors import ConfigError, InvalidDependencyError
from ds_scaffold.scaffolding.types import Dependency, parse_dependency

CONFIG_ENV_VAR = "DS_SCAFFOLD_CONFIG"
LOCAL_CONFIG_NAME = ".ds-scaffold.yaml"


@dataclass(frozen=True)
class ScaffoldConfig:
    """Defaults applied before CLI flags."""

    target_dir: Path | None = None
    init_vcs: bool = False
    author: str | None = None
    dependencies: tuple[Dependency, ...] = ()
    source: Path | None = field(default=None, compare=False)


def _candidate_paths() -> list[Path]:
    candidates: list[Path] = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(Path(env_path).expanduser())
    candidates.append(Path.cwd() / LOCAL_CONFIG_NAME)
    candidates.append(Path.home() / ".config" / "ds-scaffold" / "config.yaml")
    return candidates


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Return the config file to use, or None when there is none.

    Raises:
        ConfigError: If an explicitly requested file does not exist
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return explicit
    for candidate in _candidate_paths():
        if candidate.is_file():
            return candidate
    return None


def _parse_dependencies(raw: object, source: Path) -> tuple[Dependency, ...]:
    # Unquoted YAML versions load as numbers: 1.20 becomes 1.2
    try:
        if isinstance(raw, dict):
            deps: list[Dependency] = []
            for name, version in cast(dict[object, object], raw).items():
                if version is not None and not isinstance(version, str):
                    raise ConfigError(
                        f"{source}: version for '{name}' must be a quoted string, got {version!r}"
                    )
                deps.append(Dependency(str(name), version or ""))
            return tuple(deps)
        if isinstance(raw, list):
            deps = []
            for entry in cast(list[object], raw):
                if not isinstance(entry, str):
                    raise ConfigError(f"{source}: dependency {entry!r} must be a name==version string")
                deps.append(parse_dependency(entry))
            return tuple(deps)
    except InvalidDependencyError as exc:
        raise ConfigError(f"{source}: {exc}") from exc
    raise ConfigError(
        f"{source}: 'dependencies' must be a mapping of name to version or a list of name==version"
    )


def _expect(data: dict[str, object], key: str, kind: type, source: Path) -> object:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        raise ConfigError(f"{source}: '{key}' must be of type {kind.__name__}")
    return value


def load_config(path: Path | None = None) -> ScaffoldConfig:
    """Load scaffold defaults.

    Args:
        path: Explicit config file; when None the lookup order applies

    Returns:
        ScaffoldConfig (all defaults when no file is found)

    Raises:
        ConfigError: Unreadable file, invalid YAML or wrongly typed values
    """
    config_path = find_config_file(path)
    if config_path is None:
        return ScaffoldConfig()

    try:
        raw_data: object = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {config_path}: {exc}") from exc

    if raw_data is None:
        return ScaffoldConfig(source=config_path)
    if not isinstance(raw_data, dict):
        raise ConfigError(f"{config_path}: top level must be a mapping")

    data = cast(dict[str, object], raw_data)
    target_dir = _expect(data, "target_dir", str, config_path)
    init_vcs = _expect(data, "init_vcs", bool, config_path)
    author = _expect(data, "author", str, config_path)

    dependencies: tuple[Dependency, ...] = ()
    if data.get("dependencies") is not None:
        dependencies = _parse_dependencies(data["dependencies"], config_path)

    return ScaffoldConfig(
        target_dir=Path(str(target_dir)).expanduser() if target_dir else None,
        init_vcs=bool(init_vcs),
        author=cast("str | None", author),
        dependencies=dependencies,
        source=config_path,
    )
