"""Filesystem helpers shared by infrastructure modules."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root directory.

    The root is the first parent holding a ``pyproject.toml``; when the
    package runs from an installed location the current working directory
    is used instead.

    Returns:
        Path: Absolute path of the project root.
    """
    for parent in Path(__file__).resolve().parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


__all__ = ["get_project_root"]
