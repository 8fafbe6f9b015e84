"""Project name validation following npm's package-name rules."""

from __future__ import annotations

import re

__all__ = ["normalize_project_name", "validate_project_name"]

MAX_NAME_LENGTH = 214

_BLACKLIST = frozenset({"node_modules", "favicon.ico"})

# Node.js core modules; npm refuses new packages that shadow them.
_BUILTIN_MODULES = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")
_URL_SAFE = re.compile(r"^[A-Za-z0-9._~!*'()-]+$")
_SCOPED = re.compile(r"^@([^/]+)/([^/]+)$")


def normalize_project_name(value: str) -> str:
    """Trim surrounding whitespace from a name typed at the prompt."""
    return value.strip()


def _is_url_safe(value: str) -> bool:
    return bool(_URL_SAFE.match(value))


def validate_project_name(name: str) -> str | None:
    """Return the first reason ``name`` is not a legal package name, or None.

    The checks mirror what npm enforces for newly published packages: the
    name must be lowercase, URL-safe (optionally ``@scope/name``), must not
    start with a period or underscore, and must not collide with a Node core
    module.
    """
    if not name:
        return "Project name length must be greater than zero"
    if name != name.strip():
        return "Project name cannot contain leading or trailing spaces"
    if name.startswith("."):
        return "Project name cannot start with a period"
    if name.startswith("_"):
        return "Project name cannot start with an underscore"
    if name.lower() in _BLACKLIST:
        return f"{name} is not a valid project name"
    if name.lower() in _BUILTIN_MODULES:
        return f"{name} is a core module name"
    if len(name) > MAX_NAME_LENGTH:
        return f"Project name cannot contain more than {MAX_NAME_LENGTH} characters"
    if name.lower() != name:
        return "Project name can no longer contain capital letters"
    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        return "Project name can no longer contain special characters (\"~'!()*\")"

    if _is_url_safe(name):
        return None

    scoped = _SCOPED.match(name)
    if scoped:
        scope, package = scoped.groups()
        if _is_url_safe(scope) and _is_url_safe(package):
            return None

    return "Project name can only contain URL-friendly characters"
