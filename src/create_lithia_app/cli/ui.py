"""Reusable UI helpers for create-lithia-app interactions."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Dict, Iterable, Iterator, Optional

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

logger = logging.getLogger(__name__)


class PromptCancelled(Exception):
    """Raised when the user aborts an interactive prompt."""


class StepTracker:
    """Track and render hierarchical steps with Rich trees."""

    def __init__(self, title: str):
        self.title = title
        self.steps = []  # list of dicts: {key, label, status, detail}
        self._refresh_cb = None  # callable to trigger UI refresh

    def attach_refresh(self, cb):
        self._refresh_cb = cb

    def add(self, key: str, label: str):
        if key not in [s["key"] for s in self.steps]:
            self.steps.append({"key": key, "label": label, "status": "pending", "detail": ""})
            self._maybe_refresh()

    def start(self, key: str, detail: str = ""):
        self._update(key, status="running", detail=detail)

    def complete(self, key: str, detail: str = ""):
        self._update(key, status="done", detail=detail)

    def error(self, key: str, detail: str = ""):
        self._update(key, status="error", detail=detail)

    def skip(self, key: str, detail: str = ""):
        self._update(key, status="skipped", detail=detail)

    def status(self, key: str) -> str | None:
        for s in self.steps:
            if s["key"] == key:
                return s["status"]
        return None

    @contextmanager
    def step(self, key: str, detail: str = "", done_detail: str = "") -> Iterator[None]:
        """Mark ``key`` running for the enclosed block.

        The step ends as done on success. On failure it is marked as error
        before the exception propagates.
        """
        self.start(key, detail)
        try:
            yield
        except BaseException as exc:
            self.error(key, str(exc) or type(exc).__name__)
            raise
        self.complete(key, done_detail)

    def _update(self, key: str, status: str, detail: str):
        for s in self.steps:
            if s["key"] == key:
                s["status"] = status
                if detail:
                    s["detail"] = detail
                self._maybe_refresh()
                return
        # If not present, add it
        self.steps.append({"key": key, "label": key, "status": status, "detail": detail})
        self._maybe_refresh()

    def _maybe_refresh(self):
        if self._refresh_cb:
            try:
                self._refresh_cb()
            except Exception:
                logger.debug("Step tracker refresh failed", exc_info=True)

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            label = step["label"]
            detail_text = step["detail"].strip() if step["detail"] else ""

            status = step["status"]
            if status == "done":
                symbol = "[green]●[/green]"
            elif status == "pending":
                symbol = "[green dim]○[/green dim]"
            elif status == "running":
                symbol = "[cyan]○[/cyan]"
            elif status == "error":
                symbol = "[red]●[/red]"
            elif status == "skipped":
                symbol = "[yellow]○[/yellow]"
            else:
                symbol = " "

            if status == "pending":
                if detail_text:
                    line = f"{symbol} [bright_black]{label} ({detail_text})[/bright_black]"
                else:
                    line = f"{symbol} [bright_black]{label}[/bright_black]"
            else:
                if detail_text:
                    line = f"{symbol} [white]{label}[/white] [bright_black]({detail_text})[/bright_black]"
                else:
                    line = f"{symbol} [white]{label}[/white]"

            tree.add(line)
        return tree


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key == readchar.key.UP or key == readchar.key.CTRL_P:
        return "up"
    if key == readchar.key.DOWN or key == readchar.key.CTRL_N:
        return "down"

    if key == readchar.key.ENTER:
        return "enter"

    if key == readchar.key.ESC or key == "\x1b":
        return "escape"

    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def _resolve_console(console: Optional[Console]) -> Console:
    return console or Console()


def _next_enabled(index: int, step: int, option_keys: list[str], disabled: set[str]) -> int:
    for _ in range(len(option_keys)):
        index = (index + step) % len(option_keys)
        if option_keys[index] not in disabled:
            return index
    return index


def select_with_arrows(
    options: Dict[str, str],
    prompt_text: str = "Select an option",
    default_key: str | None = None,
    disabled: Iterable[str] = (),
    disabled_hint: str = "unavailable",
    console: Console | None = None,
) -> str:
    """
    Interactive selection using arrow keys with Rich Live display.

    Args:
        options: Dict with keys as option keys and values as descriptions
        prompt_text: Text to show above the options
        default_key: Default option key to start with
        disabled: Keys that are shown but cannot be selected
        disabled_hint: Note rendered next to each disabled key

    Returns:
        Selected option key

    Raises:
        PromptCancelled: If the user presses Esc or Ctrl-C
        ValueError: If every option is disabled
    """
    console = _resolve_console(console)
    option_keys = list(options.keys())
    disabled_keys = set(disabled)
    enabled = [key for key in option_keys if key not in disabled_keys]
    if not enabled:
        raise ValueError(f"No selectable options for '{prompt_text}'")

    if default_key in enabled:
        selected_index = option_keys.index(default_key)
    else:
        selected_index = option_keys.index(enabled[0])

    def create_selection_panel():
        """Create the selection panel with current selection highlighted."""
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        for i, key in enumerate(option_keys):
            if key in disabled_keys:
                table.add_row(" ", f"[bright_black strike]{key}[/bright_black strike] [dim]({disabled_hint})[/dim]")
                continue
            pointer = "▶" if i == selected_index else " "
            table.add_row(pointer, f"[cyan]{key}[/cyan] [dim]({options[key]})[/dim]")

        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")

        return Panel(
            table,
            title=f"[bold]{prompt_text}[/bold]",
            border_style="cyan",
            padding=(1, 2),
        )

    console.print()

    with Live(create_selection_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                raise PromptCancelled(prompt_text) from None

            if key == "up":
                selected_index = _next_enabled(selected_index, -1, option_keys, disabled_keys)
            elif key == "down":
                selected_index = _next_enabled(selected_index, 1, option_keys, disabled_keys)
            elif key == "enter":
                break
            elif key == "escape":
                raise PromptCancelled(prompt_text)

            live.update(create_selection_panel(), refresh=True)

    selected_key = option_keys[selected_index]
    console.print(f"[cyan]{prompt_text}[/cyan] {selected_key}")
    return selected_key


def prompt_text(
    message: str,
    default: str | None = None,
    validate: Callable[[str], str | None] | None = None,
    normalize: Callable[[str], str] | None = None,
) -> str:
    """Ask for free text, repeating the question while ``validate`` rejects it.

    ``validate`` returns an error message or None. ``normalize`` runs first,
    so validation sees the cleaned value.
    """

    def process(value: str) -> str:
        cleaned = normalize(value) if normalize else value
        if validate is not None:
            error = validate(cleaned)
            if error:
                raise typer.BadParameter(error)
        return cleaned

    try:
        return typer.prompt(message, default=default, value_proc=process)
    except typer.Abort:
        raise PromptCancelled(message) from None


def prompt_confirm(message: str, default: bool = False) -> bool:
    try:
        return typer.confirm(message, default=default)
    except typer.Abort:
        raise PromptCancelled(message) from None


__all__ = [
    "PromptCancelled",
    "StepTracker",
    "get_key",
    "prompt_confirm",
    "prompt_text",
    "select_with_arrows",
]
