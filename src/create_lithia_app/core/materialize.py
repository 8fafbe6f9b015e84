"""External-process steps that populate and initialize a workspace."""

from __future__ import annotations

from pathlib import Path

from .constants import VCS_TOOL
from .process import CommandResult, run_command
from .templates import TemplateDescriptor

__all__ = ["clone_template", "init_git_repository", "install_dependencies"]


async def clone_template(template: TemplateDescriptor, workspace: Path) -> CommandResult:
    """Clone ``template`` at its branch directly into the empty ``workspace``."""
    return await run_command(
        [VCS_TOOL, "clone", "--branch", template.branch, template.url, "."],
        cwd=workspace,
    )


async def init_git_repository(workspace: Path) -> CommandResult:
    return await run_command([VCS_TOOL, "init"], cwd=workspace)


async def install_dependencies(workspace: Path, manager: str) -> CommandResult:
    return await run_command([manager, "install"], cwd=workspace)
