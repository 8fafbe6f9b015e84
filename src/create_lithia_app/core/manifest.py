"""Rewrite the cloned template's package.json for the new project."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from .constants import INITIAL_VERSION, LOCKFILES, MANIFEST_FILE, VCS_DIR
from .workspace import remove_path

logger = logging.getLogger(__name__)

__all__ = [
    "ManifestError",
    "load_manifest",
    "patch_manifest",
    "prepare_manifest",
    "remove_template_artifacts",
    "write_manifest",
]


class ManifestError(RuntimeError):
    """Raised when package.json is missing or cannot be parsed."""


async def remove_template_artifacts(workspace: Path) -> list[Path]:
    """Delete the template's git metadata and committed lockfiles concurrently.

    Returns the paths that were actually removed.
    """
    targets = [workspace / VCS_DIR, *(workspace / name for name in LOCKFILES)]
    removed = await asyncio.gather(*(asyncio.to_thread(remove_path, target) for target in targets))
    return [target for target, was_removed in zip(targets, removed) if was_removed]


def load_manifest(workspace: Path) -> dict[str, Any]:
    manifest_path = workspace / MANIFEST_FILE
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"Template does not contain {MANIFEST_FILE}: {manifest_path}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to parse {manifest_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} must contain a JSON object")
    return data


def patch_manifest(data: dict[str, Any], project_name: str) -> dict[str, Any]:
    """Stamp the new project's identity onto ``data`` in place.

    Existing keys keep their position; everything other than ``name``,
    ``version`` and ``description`` passes through untouched.
    """
    data["name"] = project_name
    data["version"] = INITIAL_VERSION
    data.pop("description", None)
    return data


def write_manifest(workspace: Path, data: dict[str, Any]) -> Path:
    manifest_path = workspace / MANIFEST_FILE
    manifest_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return manifest_path


async def prepare_manifest(workspace: Path, project_name: str) -> Path:
    """Strip template artifacts and rewrite package.json for ``project_name``."""
    removed = await remove_template_artifacts(workspace)
    logger.debug("Removed template artifacts: %s", [path.name for path in removed])

    data = await asyncio.to_thread(load_manifest, workspace)
    patch_manifest(data, project_name)
    return await asyncio.to_thread(write_manifest, workspace, data)
