#!/usr/bin/env python3
"""
create-lithia-app - scaffold a new Lithia.js project from a starter template.

Usage:
    create-lithia-app
    create-lithia-app create
    create-lithia-app check
"""

import logging

import typer
from rich.align import Align
from rich.console import Console
from rich.text import Text
from typer.core import TyperGroup

from create_lithia_app.cli.commands import register_check_command, register_create_command

__version__ = "0.1.0"

BANNER = """
 _      _ _   _     _
| |    (_) |_| |__ (_) __ _
| |    | | __| '_ \\| |/ _` |
| |___ | | |_| | | | | (_| |
|_____||_|\\__|_| |_|_|\\__,_|
"""

TAGLINE = "Create a new Lithia app"

console = Console()


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="create-lithia-app",
    help="Create a new Lithia app from a starter template",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip("\n").split("\n")
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white", "bright_white"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        color = colors[i % len(colors)]
        styled_banner.append(line + "\n", style=color)

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


create = register_create_command(app, console=console, show_banner=show_banner)
check = register_check_command(app, console=console, show_banner=show_banner)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"create-lithia-app {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic output"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Run the interactive project creator when no subcommand is provided."""
    configure_logging(debug)
    ctx.obj = {"debug": debug}
    if ctx.invoked_subcommand is None:
        create(ctx)


def main():
    app()


if __name__ == "__main__":
    main()
