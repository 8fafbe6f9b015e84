"""Resolution and creation of the directory a new project is written to."""

from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["prepare_workspace", "remove_path", "resolve_workspace"]


def resolve_workspace(project_name: str, cwd: Path | None = None) -> Path:
    """Return the absolute project directory for ``project_name``."""
    base = cwd if cwd is not None else Path.cwd()
    return (base / project_name).resolve()


def remove_path(path: Path) -> bool:
    """Remove a file, symlink or directory tree. Missing paths are skipped."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
        return True
    try:
        path.unlink()
    except FileNotFoundError:
        logger.debug("Nothing to remove at %s", path)
        return False
    return True


async def prepare_workspace(path: Path, *, overwrite: bool = False) -> Path:
    """Create ``path``, removing whatever already sits there when ``overwrite``.

    The caller is responsible for asking before passing ``overwrite=True``;
    nothing is removed otherwise.
    """
    if overwrite and (path.exists() or path.is_symlink()):
        logger.debug("Removing existing workspace %s", path)
        await asyncio.to_thread(remove_path, path)
    await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
    return path
