"""Exit codes and error handling shared by the CLI commands."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Never

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from projdata.config import Config

    from ._context import CLIContext

__all__ = [
    "ExitCode",
    "apply_overrides",
    "exit_with_error",
    "require_config",
]


class ExitCode(IntEnum):
    """Exit codes of the projdata CLI."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3
    IO_ERROR = 4


def exit_with_error(
    message: str,
    code: ExitCode,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message to stderr and exit.

    Args:
        message: The error message. Rich markup in it is escaped.
        code: The exit code.
        console: Console to print to. Defaults to a new stderr console.

    Raises:
        SystemExit: Always, with ``code``.
    """
    if console is None:
        console = Console(stderr=True, soft_wrap=True)

    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise SystemExit(code)


def require_config(ctx: CLIContext) -> Config:
    """Return the loaded configuration, exiting if loading fell back to defaults."""
    if ctx.config_error is not None:
        exit_with_error(
            f"Failed to load configuration: {ctx.config_error}", ExitCode.LOAD_ERROR
        )
    return ctx.config


def apply_overrides(config: Config, section: str, values: dict[str, object]) -> Config:
    """Apply command-line option values to one config section.

    None values are skipped so unset options keep the configured value.

    Returns:
        The given config if nothing was overridden, else a revalidated copy.

    Raises:
        ConfigValidationError: If an override is invalid.
    """
    overrides = {key: value for key, value in values.items() if value is not None}
    if not overrides:
        return config
    return config.with_values(section, overrides)
