"""Catalog of starter repositories a project can be created from."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TemplateDescriptor:
    """A clonable starter repository and the branch to check out."""

    name: str
    branch: str
    url: str
    description: str


TEMPLATES: tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor(
        name="default",
        branch="main",
        url="https://github.com/lithiajs/lithia-default-app-template.git",
        description="Setup a Lithia.js app with no presets",
    ),
    TemplateDescriptor(
        name="with-drizzle",
        branch="main",
        url="https://github.com/lithiajs/lithia-with-drizzle-template.git",
        description="Setup a Lithia.js app using Drizzle ORM",
    ),
    TemplateDescriptor(
        name="with-prisma",
        branch="main",
        url="https://github.com/lithiajs/lithia-with-prisma-template.git",
        description="Setup a Lithia.js app using Prisma ORM",
    ),
)

DEFAULT_TEMPLATE = TEMPLATES[0].name


def get_template(name: str) -> TemplateDescriptor:
    """Return the catalog entry called ``name``.

    Raises:
        KeyError: If no template with that name exists.
    """
    for template in TEMPLATES:
        if template.name == name:
            return template
    raise KeyError(name)


__all__ = ["DEFAULT_TEMPLATE", "TEMPLATES", "TemplateDescriptor", "get_template"]
