from __future__ import annotations

import json
from pathlib import Path

DEFAULT_TEMPLATE_MANIFEST = {
    "name": "lithia-default-app-template",
    "version": "1.4.2",
    "description": "Starter template",
    "private": True,
    "scripts": {"dev": "lithia dev", "build": "lithia build"},
    "dependencies": {"lithia": "^1.0.0"},
}


def write_template_checkout(path: Path, manifest: dict | None = None, *, lockfile: bool = True) -> None:
    """Lay out what a fresh clone of a starter template looks like."""
    path.mkdir(parents=True, exist_ok=True)
    (path / ".git" / "objects").mkdir(parents=True, exist_ok=True)
    (path / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    if lockfile:
        (path / "package-lock.json").write_text("{}\n", encoding="utf-8")
    (path / "src").mkdir(exist_ok=True)
    (path / "src" / "index.ts").write_text("export {};\n", encoding="utf-8")
    payload = manifest if manifest is not None else DEFAULT_TEMPLATE_MANIFEST
    (path / "package.json").write_text(json.dumps(payload, indent=4), encoding="utf-8")
