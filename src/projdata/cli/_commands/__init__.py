"""projdata CLI commands."""
# pyright: reportUnusedCallResult=false

from __future__ import annotations

from typing import TYPE_CHECKING

from ._check import app as check_app
from ._config import app as config_app
from ._context import CLIContext
from ._generate import app as generate_app
from ._shared import ExitCode, apply_overrides, exit_with_error, require_config

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "apply_overrides",
    "check_app",
    "config_app",
    "exit_with_error",
    "generate_app",
    "register_commands",
    "require_config",
]


def register_commands(app: App) -> None:
    app.command(check_app)
    app.command(config_app)
    app.command(generate_app)
