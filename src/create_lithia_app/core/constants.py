"""Shared file names and defaults for generated Lithia projects."""

from __future__ import annotations

MANIFEST_FILE = "package.json"
VCS_DIR = ".git"
LOCKFILES = ("package-lock.json", "yarn.lock")

INITIAL_VERSION = "0.1.0"
DEFAULT_PROJECT_NAME = "my-lithia-app"

VCS_TOOL = "git"
PACKAGE_MANAGERS = ("npm", "yarn")

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "INITIAL_VERSION",
    "LOCKFILES",
    "MANIFEST_FILE",
    "PACKAGE_MANAGERS",
    "VCS_DIR",
    "VCS_TOOL",
]
