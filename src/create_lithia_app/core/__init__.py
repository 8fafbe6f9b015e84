"""Core scaffolding operations and configuration exports."""

from .config import ConfigError, ScaffoldConfig, load_config
from .manifest import ManifestError, prepare_manifest
from .materialize import clone_template, init_git_repository, install_dependencies
from .naming import normalize_project_name, validate_project_name
from .process import CommandError, run_command
from .templates import TEMPLATES, TemplateDescriptor, get_template
from .tools import Capabilities, probe_capabilities
from .workspace import prepare_workspace, resolve_workspace

__all__ = [
    "Capabilities",
    "CommandError",
    "ConfigError",
    "ManifestError",
    "ScaffoldConfig",
    "TEMPLATES",
    "TemplateDescriptor",
    "clone_template",
    "get_template",
    "init_git_repository",
    "install_dependencies",
    "load_config",
    "normalize_project_name",
    "prepare_manifest",
    "prepare_workspace",
    "probe_capabilities",
    "resolve_workspace",
    "run_command",
    "validate_project_name",
]
