"""Declarative interview that collects the answers for a new project.

Each :class:`Question` decides from the answers gathered so far whether it is
asked at all and, for selections, which choices are offered. The collector
walks the list in order, so later questions can branch on earlier ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Protocol

from create_lithia_app.core.config import ScaffoldConfig
from create_lithia_app.core.constants import PACKAGE_MANAGERS
from create_lithia_app.core.naming import normalize_project_name, validate_project_name
from create_lithia_app.core.templates import TEMPLATES, TemplateDescriptor, get_template
from create_lithia_app.core.tools import Capabilities

from .ui import prompt_confirm, prompt_text, select_with_arrows

logger = logging.getLogger(__name__)

QuestionKind = Literal["text", "select", "confirm"]
Answers = dict[str, Any]


@dataclass(frozen=True)
class Choice:
    value: str
    description: str = ""
    disabled: bool = False


@dataclass
class Question:
    """One step of the interview."""

    name: str
    kind: QuestionKind
    message: str
    default: Any = None
    when: Callable[[Answers], bool] = lambda answers: True
    choices: Callable[[Answers], list[Choice]] = lambda answers: []
    validate: Callable[[str], str | None] | None = None
    normalize: Callable[[str], str] | None = None
    disabled_hint: str = "unavailable"


@dataclass
class AnswerSet:
    """Everything the user decided about the project to create."""

    project_name: str
    template: TemplateDescriptor
    install_dependencies: bool
    package_manager: str | None = None
    git_init: bool | None = None
    raw: Answers = field(default_factory=dict, repr=False)

    @classmethod
    def from_answers(cls, answers: Answers) -> "AnswerSet":
        return cls(
            project_name=answers["project_name"],
            template=get_template(answers["template"]),
            install_dependencies=bool(answers.get("install_dependencies", False)),
            package_manager=answers.get("package_manager"),
            git_init=answers.get("git_init"),
            raw=dict(answers),
        )


class Prompter(Protocol):
    def text(self, question: Question) -> str: ...

    def select(self, question: Question, choices: list[Choice]) -> str: ...

    def confirm(self, question: Question) -> bool: ...


class ConsolePrompter:
    """Render questions with the interactive terminal helpers."""

    def __init__(self, console=None):
        self.console = console

    def text(self, question: Question) -> str:
        return prompt_text(
            question.message,
            default=question.default,
            validate=question.validate,
            normalize=question.normalize,
        )

    def select(self, question: Question, choices: list[Choice]) -> str:
        return select_with_arrows(
            {choice.value: choice.description for choice in choices},
            question.message,
            default_key=question.default,
            disabled=[choice.value for choice in choices if choice.disabled],
            disabled_hint=question.disabled_hint,
            console=self.console,
        )

    def confirm(self, question: Question) -> bool:
        return prompt_confirm(question.message, default=bool(question.default))


def build_questions(capabilities: Capabilities, config: ScaffoldConfig | None = None) -> list[Question]:
    """Return the ordered interview for the given host capabilities."""
    config = config or ScaffoldConfig()

    def manager_choices(answers: Answers) -> list[Choice]:
        return [
            Choice(manager, f"install with {manager}", disabled=not capabilities.has_manager(manager))
            for manager in PACKAGE_MANAGERS
        ]

    return [
        Question(
            name="project_name",
            kind="text",
            message="What is the name of your project?",
            default=config.project_name,
            validate=validate_project_name,
            normalize=normalize_project_name,
        ),
        Question(
            name="template",
            kind="select",
            message="Choose a template for your project",
            default=config.template,
            choices=lambda answers: [Choice(t.name, t.description) for t in TEMPLATES],
        ),
        Question(
            name="install_dependencies",
            kind="confirm",
            message="Do you want to install dependencies after creating the project?",
            default=config.install_dependencies,
            # Without any package manager there is nothing to choose from.
            when=lambda answers: capabilities.any_manager,
        ),
        Question(
            name="package_manager",
            kind="select",
            message="Choose a package manager to install dependencies",
            default=config.package_manager,
            when=lambda answers: bool(answers.get("install_dependencies")),
            choices=manager_choices,
            disabled_hint="not installed",
        ),
        Question(
            name="git_init",
            kind="confirm",
            message="Do you want to initialize a git repository?",
            default=config.git_init,
            when=lambda answers: capabilities.git,
        ),
    ]


def collect_answers(questions: list[Question], prompter: Prompter) -> AnswerSet:
    """Ask ``questions`` in order and build the resulting :class:`AnswerSet`.

    Raises:
        PromptCancelled: If the user aborts any prompt.
    """
    answers: Answers = {}
    for question in questions:
        if not question.when(answers):
            logger.debug("Skipping question %s", question.name)
            continue

        if question.kind == "text":
            answers[question.name] = prompter.text(question)
        elif question.kind == "select":
            answers[question.name] = prompter.select(question, question.choices(answers))
        elif question.kind == "confirm":
            answers[question.name] = prompter.confirm(question)
        else:
            raise ValueError(f"Unknown question kind: {question.kind}")

    return AnswerSet.from_answers(answers)


__all__ = [
    "AnswerSet",
    "Choice",
    "ConsolePrompter",
    "Prompter",
    "Question",
    "build_questions",
    "collect_answers",
]
