"""Awaitable wrapper around external commands (git, npm, yarn)."""

from __future__ import annotations

import asyncio
import logging
import shlex
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["CommandError", "CommandResult", "run_command"]

# Exit status reported when the executable cannot be launched at all.
COMMAND_NOT_FOUND = 127


class CommandError(RuntimeError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Command '{shlex.join(command)}' failed with exit code {returncode}")


@dataclass
class CommandResult:
    returncode: int
    stdout: str
    stderr: str


def _resolve_executable(name: str) -> str:
    # shutil.which also finds npm.cmd / yarn.cmd shims on Windows.
    return shutil.which(name) or name


async def run_command(cmd: list[str], cwd: Path | None = None) -> CommandResult:
    """Run ``cmd`` to completion and return its captured output.

    The call blocks the calling flow until the process exits; there is no
    timeout. A non-zero exit, or an executable that cannot be started, raises
    :class:`CommandError`.
    """
    logger.debug("Running %s (cwd=%s)", shlex.join(cmd), cwd)
    argv = [_resolve_executable(cmd[0]), *cmd[1:]]
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            cwd=str(cwd) if cwd is not None else None,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise CommandError(cmd, COMMAND_NOT_FOUND, f"{cmd[0]} executable not found on PATH") from exc

    stdout, stderr = await process.communicate()
    result = CommandResult(
        returncode=process.returncode if process.returncode is not None else 0,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )
    logger.debug("%s exited with %s", cmd[0], result.returncode)
    if result.returncode != 0:
        raise CommandError(cmd, result.returncode, result.stderr)
    return result
