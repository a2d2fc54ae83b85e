"""Configuration loading for CLI runs."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from rich.console import Console
from rich.markup import escape

from projdata.exceptions import ConfigError

from ._models import Config

if TYPE_CHECKING:
    from pathlib import Path

STRICT_CONFIG_VAR: Final[str] = "PROJDATA_STRICT_CONFIG"


def strict_config_enabled() -> bool:
    """Return True when PROJDATA_STRICT_CONFIG=1 asks for fail-fast loading."""
    return os.environ.get(STRICT_CONFIG_VAR, "0") == "1"


def safe_load_config(
    *,
    config_path: Path | None = None,
    project_root: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
    console: Console | None = None,
) -> tuple[Config, str | None]:
    """Load the layered configuration for a CLI run.

    A ``--config`` file that does not exist always ends the run with exit
    code 1. Other failures end it only in strict mode, where unknown keys are
    rejected too. Otherwise a warning is printed and the defaults are
    returned along with the error, so commands that need project values can
    refuse to run on them.

    Args:
        config_path: Explicit project config file (``--config``).
        project_root: Project root override (``--project-root``).
        cli_overrides: Values derived from global CLI options.
        console: Console for warnings and errors. Defaults to stderr.

    Returns:
        The configuration and None, or the defaults and the error message.

    Raises:
        SystemExit: If the explicit file is missing, or loading fails in
            strict mode.
    """
    if console is None:
        console = Console(stderr=True, soft_wrap=True)

    if config_path is not None and not config_path.is_file():
        console.print(
            f"[red]Error:[/red] Config file not found: {escape(str(config_path))}",
            highlight=False,
        )
        raise SystemExit(1)

    strict = strict_config_enabled()
    try:
        config = Config.load(
            project_root=project_root,
            config_file=config_path,
            cli_overrides=cli_overrides,
            strict=strict,
        )
    except (ConfigError, OSError) as e:
        message = str(e) if isinstance(e, ConfigError) else f"Cannot read config: {e}"
        if strict:
            console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
            raise SystemExit(1) from e
        console.print(
            f"[yellow]Warning:[/yellow] Using defaults, {escape(message)}",
            highlight=False,
        )
        fallback_root = project_root
        if fallback_root is None and config_path is not None:
            fallback_root = config_path.parent
        return Config.from_dict({}, root=fallback_root), message

    return config, None
