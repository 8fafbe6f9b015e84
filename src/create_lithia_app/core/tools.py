"""Detection of the external tools the scaffolder shells out to."""

from __future__ import annotations

import asyncio
import logging
import shutil
from dataclasses import dataclass

from .constants import VCS_TOOL

logger = logging.getLogger(__name__)

__all__ = ["Capabilities", "ping_version", "probe_capabilities"]


@dataclass(frozen=True)
class Capabilities:
    """Availability of each external tool on the host."""

    npm: bool = False
    yarn: bool = False
    git: bool = False

    def has_manager(self, manager: str) -> bool:
        return bool(getattr(self, manager, False))

    @property
    def any_manager(self) -> bool:
        return self.npm or self.yarn


async def ping_version(tool: str) -> bool:
    """
    Check if ``tool`` is installed and working.

    Returns:
        True if the tool is on PATH and ``<tool> --version`` exits with 0,
        False otherwise. Absence is an expected outcome and never raises.
    """
    executable = shutil.which(tool)
    if executable is None:
        logger.debug("%s not found on PATH", tool)
        return False
    try:
        process = await asyncio.create_subprocess_exec(
            executable,
            "--version",
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        returncode = await process.wait()
    except OSError as exc:
        logger.debug("Probing %s failed: %s", tool, exc)
        return False
    return returncode == 0


async def probe_capabilities() -> Capabilities:
    """Probe npm, yarn and git concurrently."""
    npm, yarn, git = await asyncio.gather(
        ping_version("npm"),
        ping_version("yarn"),
        ping_version(VCS_TOOL),
    )
    capabilities = Capabilities(npm=npm, yarn=yarn, git=git)
    logger.debug("Detected capabilities: %s", capabilities)
    return capabilities
