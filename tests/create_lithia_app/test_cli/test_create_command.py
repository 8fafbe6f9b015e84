"""End-to-end tests for the interactive ``create`` flow with fake tools."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console
from typer import Typer
from typer.testing import CliRunner

from create_lithia_app.cli.commands import create as create_module
from create_lithia_app.cli.commands.create import register_create_command
from create_lithia_app.cli.questions import Choice, Question
from create_lithia_app.cli.ui import PromptCancelled
from create_lithia_app.core.process import CommandError
from create_lithia_app.core.templates import TemplateDescriptor
from create_lithia_app.core.tools import Capabilities
from tests.utils import write_template_checkout


class ScriptedPrompter:
    def __init__(self, responses: dict[str, object]):
        self.responses = responses
        self.asked: list[str] = []

    def _answer(self, question: Question):
        self.asked.append(question.name)
        response = self.responses[question.name]
        if isinstance(response, BaseException):
            raise response
        return response

    def text(self, question: Question) -> str:
        return self._answer(question)

    def select(self, question: Question, choices: list[Choice]) -> str:
        return self._answer(question)

    def confirm(self, question: Question) -> bool:
        return self._answer(question)


class Harness:
    def __init__(self, monkeypatch: pytest.MonkeyPatch, cwd: Path):
        self.cwd = cwd
        self.console = Console(file=io.StringIO(), force_terminal=False, width=120)
        self.banners = 0
        self.responses: dict[str, object] = {
            "project_name": "my-app",
            "template": "default",
            "install_dependencies": False,
            "git_init": False,
        }
        self.capabilities = Capabilities(npm=True, yarn=True, git=True)
        self.overwrite: bool | BaseException = False
        self.overwrite_asked = False
        self.commands: list[tuple[str, ...]] = []
        self.clone_error: CommandError | None = None
        self.install_error: CommandError | None = None
        self.prompter: ScriptedPrompter | None = None

        async def fake_probe() -> Capabilities:
            return self.capabilities

        async def fake_clone(template: TemplateDescriptor, workspace: Path):
            self.commands.append(("clone", template.name, template.branch, str(workspace)))
            assert list(workspace.iterdir()) == []
            if self.clone_error is not None:
                raise self.clone_error
            write_template_checkout(workspace)

        async def fake_git_init(workspace: Path):
            self.commands.append(("git-init", str(workspace)))

        async def fake_install(workspace: Path, manager: str):
            self.commands.append(("install", manager, str(workspace)))
            if self.install_error is not None:
                raise self.install_error

        def fake_confirm(message: str, default: bool = False) -> bool:
            self.overwrite_asked = True
            assert default is False
            if isinstance(self.overwrite, BaseException):
                raise self.overwrite
            return self.overwrite

        monkeypatch.chdir(cwd)
        monkeypatch.setattr(create_module, "probe_capabilities", fake_probe)
        monkeypatch.setattr(create_module, "clone_template", fake_clone)
        monkeypatch.setattr(create_module, "init_git_repository", fake_git_init)
        monkeypatch.setattr(create_module, "install_dependencies", fake_install)
        monkeypatch.setattr(create_module, "prompt_confirm", fake_confirm)

    def _prompter_factory(self, console: Console) -> ScriptedPrompter:
        self.prompter = ScriptedPrompter(self.responses)
        return self.prompter

    def _show_banner(self) -> None:
        self.banners += 1

    def invoke(self):
        app = Typer()
        register_create_command(
            app,
            console=self.console,
            show_banner=self._show_banner,
            prompter_factory=self._prompter_factory,
        )
        return CliRunner().invoke(app, [], catch_exceptions=False)

    @property
    def output(self) -> str:
        return self.console.file.getvalue()


@pytest.fixture
def harness(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Harness:
    return Harness(monkeypatch, tmp_path)


def test_scenario_without_install_or_git(harness: Harness, tmp_path: Path) -> None:
    result = harness.invoke()

    assert result.exit_code == 0
    project = tmp_path / "my-app"
    assert (project / "src" / "index.ts").exists()
    assert not (project / ".git").exists()
    assert not (project / "package-lock.json").exists()

    manifest = json.loads((project / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "my-app"
    assert manifest["version"] == "0.1.0"
    assert "description" not in manifest
    assert manifest["dependencies"] == {"lithia": "^1.0.0"}

    assert harness.commands == [("clone", "default", "main", str(project))]
    assert "cd my-app" in harness.output
    assert "npm run dev" in harness.output
    assert "Project ready." in harness.output
    assert harness.banners == 1


def test_git_init_and_install_run_when_requested(harness: Harness, tmp_path: Path) -> None:
    harness.responses.update({"install_dependencies": True, "package_manager": "yarn", "git_init": True})

    result = harness.invoke()

    assert result.exit_code == 0
    project = str(tmp_path / "my-app")
    assert harness.commands == [
        ("clone", "default", "main", project),
        ("git-init", project),
        ("install", "yarn", project),
    ]
    assert "yarn run dev" in harness.output
    assert "yarn install" not in harness.output


def test_no_git_means_no_git_prompt_or_init(harness: Harness) -> None:
    harness.capabilities = Capabilities(npm=True, yarn=False, git=False)

    result = harness.invoke()

    assert result.exit_code == 0
    assert "git_init" not in harness.prompter.asked
    assert all(command[0] != "git-init" for command in harness.commands)
    assert "Git not found" in harness.output


def test_cancelled_interview_exits_cleanly(harness: Harness, tmp_path: Path) -> None:
    harness.responses["template"] = PromptCancelled("template")

    result = harness.invoke()

    assert result.exit_code == 0
    assert "Operation cancelled" in harness.output
    assert harness.commands == []
    assert not (tmp_path / "my-app").exists()


def test_existing_directory_declined_leaves_it_untouched(harness: Harness, tmp_path: Path) -> None:
    existing = tmp_path / "my-app"
    existing.mkdir()
    (existing / "notes.txt").write_text("mine", encoding="utf-8")

    result = harness.invoke()

    assert result.exit_code == 0
    assert harness.overwrite_asked
    assert "Operation cancelled" in harness.output
    assert harness.commands == []
    assert [p.name for p in existing.iterdir()] == ["notes.txt"]


def test_existing_directory_overwrite_cancelled_with_ctrl_c(harness: Harness, tmp_path: Path) -> None:
    (tmp_path / "my-app").mkdir()
    harness.overwrite = PromptCancelled("overwrite")

    result = harness.invoke()

    assert result.exit_code == 0
    assert harness.commands == []


def test_existing_directory_overwrite_replaces_contents(harness: Harness, tmp_path: Path) -> None:
    existing = tmp_path / "my-app"
    existing.mkdir()
    (existing / "notes.txt").write_text("mine", encoding="utf-8")
    harness.overwrite = True

    result = harness.invoke()

    assert result.exit_code == 0
    assert not (existing / "notes.txt").exists()
    assert (existing / "package.json").exists()


def test_clone_failure_exits_with_command_status(harness: Harness, tmp_path: Path) -> None:
    harness.clone_error = CommandError(
        ["git", "clone", "--branch", "main", "https://example.invalid/repo.git", "."],
        128,
        "fatal: repository not found",
    )
    harness.responses.update({"install_dependencies": True, "package_manager": "npm", "git_init": True})

    result = harness.invoke()

    assert result.exit_code == 128
    assert "Failure" in harness.output
    assert "repository not found" in harness.output
    # Nothing after the failed step runs and the directory is left behind.
    assert [command[0] for command in harness.commands] == ["clone"]
    assert (tmp_path / "my-app").is_dir()


def test_install_failure_keeps_workspace(harness: Harness, tmp_path: Path) -> None:
    harness.install_error = CommandError(["npm", "install"], 1, "npm ERR! boom")
    harness.responses.update({"install_dependencies": True, "package_manager": "npm", "git_init": True})

    result = harness.invoke()

    assert result.exit_code == 1
    assert "Failure" in harness.output
    assert "npm ERR! boom" in harness.output
    assert [command[0] for command in harness.commands] == ["clone", "git-init", "install"]
    project = tmp_path / "my-app"
    assert project.is_dir()
    assert (project / "package.json").exists()
    assert "Next Steps" not in harness.output


def test_manifest_failure_exits_with_one(harness: Harness, monkeypatch: pytest.MonkeyPatch) -> None:
    async def clone_without_manifest(template: TemplateDescriptor, workspace: Path):
        (workspace / ".git").mkdir()

    monkeypatch.setattr(create_module, "clone_template", clone_without_manifest)

    result = harness.invoke()

    assert result.exit_code == 1
    assert "package.json" in harness.output


def test_invalid_config_is_reported_before_prompting(harness: Harness, isolated_app_home: Path) -> None:
    isolated_app_home.mkdir(parents=True)
    (isolated_app_home / "config.yaml").write_text("just a string\n", encoding="utf-8")

    result = harness.invoke()

    assert result.exit_code == 1
    assert "Error:" in harness.output
    assert harness.prompter is None


def test_config_defaults_drive_next_steps(harness: Harness, isolated_app_home: Path) -> None:
    isolated_app_home.mkdir(parents=True)
    (isolated_app_home / "config.yaml").write_text("package_manager: yarn\n", encoding="utf-8")

    result = harness.invoke()

    assert result.exit_code == 0
    assert "yarn install" in harness.output
    assert "yarn run dev" in harness.output
    assert all(command[0] != "install" for command in harness.commands)
