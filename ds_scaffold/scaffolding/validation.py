"""Input validation performed before anything touches the filesystem."""

import os

from .errors import InvalidNameError

_RESERVED_CHARS = set('<>:"|?*\0')
_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


def validate_project_name(name: str) -> str:
    """Check that ``name`` can be used as a single directory name.

    Args:
        name: Project name as given by the user

    Returns:
        The name, unchanged

    Raises:
        InvalidNameError: If the name is empty, a relative path marker,
            contains a path separator or a reserved character, or has
            surrounding whitespace
    """
    if not name or not name.strip():
        raise InvalidNameError("Project name must not be empty")
    if name != name.strip():
        raise InvalidNameError(
            f"Project name '{name}' has leading or trailing whitespace"
        )
    if name in (".", ".."):
        raise InvalidNameError(f"'{name}' is not a valid project name")

    separators = sorted(ch for ch in _SEPARATORS if ch in name)
    if separators:
        raise InvalidNameError(
            f"Project name '{name}' must not contain path separators ({' '.join(separators)})"
        )

    reserved = sorted({ch for ch in name if ch in _RESERVED_CHARS})
    if reserved:
        shown = " ".join(repr(ch) for ch in reserved)
        raise InvalidNameError(
            f"Project name '{name}' contains reserved characters: {shown}"
        )

    return name
