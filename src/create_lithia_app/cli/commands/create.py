"""Interactive ``create`` command: interview, clone, patch, initialize, report."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Callable

import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel

from create_lithia_app.cli.questions import AnswerSet, ConsolePrompter, Prompter, build_questions, collect_answers
from create_lithia_app.cli.ui import PromptCancelled, StepTracker, prompt_confirm
from create_lithia_app.core.config import ConfigError, ScaffoldConfig, load_config
from create_lithia_app.core.manifest import ManifestError, prepare_manifest
from create_lithia_app.core.materialize import clone_template, init_git_repository, install_dependencies
from create_lithia_app.core.process import CommandError
from create_lithia_app.core.tools import Capabilities, probe_capabilities
from create_lithia_app.core.workspace import prepare_workspace, resolve_workspace

logger = logging.getLogger(__name__)

__all__ = ["build_project", "register_create_command"]


def _cancel(console: Console) -> None:
    console.print("[yellow]Operation cancelled[/yellow]")
    raise typer.Exit(0)


def _build_tracker(answers: AnswerSet, capabilities: Capabilities) -> StepTracker:
    tracker = StepTracker("Create Lithia App")
    tracker.add("workspace", "Create project directory")
    tracker.add("clone", "Clone template repository")
    tracker.add("manifest", "Prepare workspace")
    tracker.add("git", "Initialize git repository")
    tracker.add("install", "Install dependencies")
    tracker.add("final", "Finalize")

    if not capabilities.git:
        tracker.skip("git", "git not available")
    elif not answers.git_init:
        tracker.skip("git", "not requested")
    if not answers.install_dependencies:
        tracker.skip("install", "not requested")
    return tracker


async def build_project(
    project_path: Path,
    answers: AnswerSet,
    tracker: StepTracker,
    *,
    overwrite: bool = False,
) -> None:
    """Run every filesystem and external-process step in order.

    Any failure propagates immediately; whatever was already written to
    ``project_path`` is left in place.
    """
    with tracker.step("workspace", done_detail=str(project_path)):
        await prepare_workspace(project_path, overwrite=overwrite)

    with tracker.step("clone", answers.template.url, done_detail=f"{answers.template.name}@{answers.template.branch}"):
        await clone_template(answers.template, project_path)

    with tracker.step("manifest", done_detail="package.json updated"):
        await prepare_manifest(project_path, answers.project_name)

    if answers.git_init:
        with tracker.step("git", done_detail="initialized"):
            await init_git_repository(project_path)

    if answers.install_dependencies and answers.package_manager:
        with tracker.step("install", answers.package_manager, done_detail=answers.package_manager):
            await install_dependencies(project_path, answers.package_manager)

    tracker.complete("final", "project ready")


def _print_failure(console: Console, exc: Exception, debug: bool) -> None:
    lines = [f"Project creation failed: {exc}"]
    if isinstance(exc, CommandError) and exc.stderr.strip():
        tail = exc.stderr.strip().splitlines()[-10:]
        lines.append("")
        lines.extend(f"[bright_black]{line}[/bright_black]" for line in tail)
    console.print(Panel("\n".join(lines), title="Failure", border_style="red"))
    if debug:
        _env_pairs = [
            ("Python", sys.version.split()[0]),
            ("Platform", sys.platform),
            ("CWD", str(Path.cwd())),
        ]
        _label_width = max(len(k) for k, _ in _env_pairs)
        env_lines = [f"{k.ljust(_label_width)} → [bright_black]{v}[/bright_black]" for k, v in _env_pairs]
        console.print(Panel("\n".join(env_lines), title="Debug Environment", border_style="magenta"))


def _print_next_steps(console: Console, answers: AnswerSet, config: ScaffoldConfig) -> None:
    manager = answers.package_manager or config.package_manager

    steps_lines = [
        "Your project is ready to go, now you just need to run the following commands:",
        "",
        f"1. Go to the project folder: [cyan]cd {answers.project_name}[/cyan]",
    ]
    step_num = 2
    if not answers.install_dependencies:
        steps_lines.append(f"{step_num}. Install dependencies: [cyan]{manager} install[/cyan]")
        step_num += 1
    steps_lines.append(f"{step_num}. Start the development server: [cyan]{manager} run dev[/cyan]")

    console.print()
    console.print(Panel("\n".join(steps_lines), title="Next Steps", border_style="cyan", padding=(1, 2)))


def register_create_command(
    app: typer.Typer,
    *,
    console: Console,
    show_banner: Callable[[], None],
    prompter_factory: Callable[[Console], Prompter] = ConsolePrompter,
) -> Callable[[typer.Context], None]:
    """Attach the ``create`` command to ``app`` and return it."""

    @app.command()
    def create(ctx: typer.Context) -> None:
        """
        Create a new Lithia app from one of the starter templates.

        This command will:
        1. Check which of git, npm and yarn are installed
        2. Ask for the project name, template and setup preferences
        3. Clone the template into a new directory named after the project
        4. Reset package.json (name, version 0.1.0, no description)
        5. Optionally initialize a git repository and install dependencies
        """
        debug = bool((ctx.obj or {}).get("debug"))
        show_banner()

        try:
            config = load_config()
        except ConfigError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1)

        capabilities = asyncio.run(probe_capabilities())
        if not capabilities.git:
            console.print("[yellow]Git not found - the template cannot be cloned without it[/yellow]")

        try:
            answers = collect_answers(build_questions(capabilities, config), prompter_factory(console))
            project_path = resolve_workspace(answers.project_name)
            overwrite = False
            if project_path.exists():
                overwrite = prompt_confirm(
                    f"The directory {answers.project_name} already exists. Do you want to overwrite it?",
                    default=False,
                )
                if not overwrite:
                    _cancel(console)
        except PromptCancelled:
            _cancel(console)

        logger.debug("Collected answers: %s", answers)
        console.print()

        tracker = _build_tracker(answers, capabilities)
        with Live(tracker.render(), console=console, refresh_per_second=8, transient=True) as live:
            tracker.attach_refresh(lambda: live.update(tracker.render()))
            try:
                asyncio.run(build_project(project_path, answers, tracker, overwrite=overwrite))
            except CommandError as exc:
                tracker.error("final", str(exc))
                failure: Exception | None = exc
                exit_code = exc.returncode or 1
            except (ManifestError, OSError) as exc:
                tracker.error("final", str(exc))
                failure = exc
                exit_code = 1
            else:
                failure = None
                exit_code = 0

        console.print(tracker.render())
        if failure is not None:
            _print_failure(console, failure, debug)
            raise typer.Exit(exit_code)

        console.print("\n[bold green]Project ready.[/bold green]")
        _print_next_steps(console, answers, config)

    return create
