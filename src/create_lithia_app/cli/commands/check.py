"""``check`` command: report which external tools are installed."""

from __future__ import annotations

import asyncio
from typing import Callable

import typer
from rich.console import Console

from create_lithia_app.cli.ui import StepTracker
from create_lithia_app.core.constants import PACKAGE_MANAGERS, VCS_TOOL
from create_lithia_app.core.tools import Capabilities, probe_capabilities

__all__ = ["register_check_command", "render_capabilities"]

TOOL_LABELS = {
    VCS_TOOL: "Git version control",
    "npm": "npm package manager",
    "yarn": "Yarn package manager",
}


def render_capabilities(capabilities: Capabilities) -> StepTracker:
    tracker = StepTracker("Check Available Tools")
    for tool, label in TOOL_LABELS.items():
        tracker.add(tool, label)
        if getattr(capabilities, tool):
            tracker.complete(tool, "available")
        else:
            tracker.error(tool, "not found")
    return tracker


def register_check_command(
    app: typer.Typer,
    *,
    console: Console,
    show_banner: Callable[[], None],
) -> Callable[[], None]:
    @app.command()
    def check() -> None:
        """Check that the tools used to create a project are installed."""
        show_banner()
        console.print("[bold]Checking for installed tools...[/bold]\n")

        capabilities = asyncio.run(probe_capabilities())
        console.print(render_capabilities(capabilities).render())

        console.print("\n[bold green]create-lithia-app is ready to use![/bold green]")
        if not capabilities.git:
            console.print("[dim]Tip: Install git to clone templates (https://git-scm.com/downloads)[/dim]")
        if not capabilities.any_manager:
            managers = " or ".join(PACKAGE_MANAGERS)
            console.print(f"[dim]Tip: Install {managers} to install dependencies automatically[/dim]")

    return check
