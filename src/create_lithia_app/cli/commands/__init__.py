"""CLI command modules for create-lithia-app."""

from .check import register_check_command
from .create import register_create_command

__all__ = ["register_check_command", "register_create_command"]
