"""Filesystem writes shared by create and update.

Every OSError is re-raised as PermissionDeniedError carrying the failing path.
"""

from pathlib import Path

from .errors import PermissionDeniedError


def ensure_dir(path: Path) -> bool:
    """Create ``path`` and its parents. Returns True if it did not exist before."""
    try:
        if path.is_dir():
            return False
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PermissionDeniedError(path, exc) from exc
    return True


def write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise PermissionDeniedError(path, exc) from exc
