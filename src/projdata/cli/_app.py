"""The command-line interface for projdata."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from projdata.config import safe_load_config
from projdata.utils import cli_logger

from ._commands import register_commands
from ._commands._context import CLIContext

_HELP = "Generate a source file embedding project metadata."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the projdata CLI application.

    Args:
        console: Console for regular output.
        error_console: Console for error output.
        exit_on_error: Exit on parse errors instead of raising.

    Returns:
        The configured cyclopts App.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="projdata",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable verbose output")] = False,
        quiet: Annotated[bool, Parameter(help="Suppress non-essential output")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
        project_root: Annotated[
            Path | None, Parameter(name="--project-root", help="Path to project root")
        ] = None,
    ) -> None:
        """Launch projdata CLI with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Enable verbose output and debug logging.
            quiet: Suppress non-essential output and log errors only.
            config: Explicit path to config file.
            project_root: Path to project root directory.
        """
        cli_overrides: dict[str, object] | None = None
        if verbose:
            cli_overrides = {"logging": {"level": "debug"}}
        elif quiet:
            cli_overrides = {"logging": {"level": "error"}}

        loaded_config, config_error = safe_load_config(
            config_path=config,
            project_root=project_root,
            cli_overrides=cli_overrides,
        )

        log_file = loaded_config.logging.file
        with cli_logger(
            level=loaded_config.logging.level.value,
            log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
            log_file=loaded_config.resolve_path(log_file) if log_file else "",
        ) as logger:
            CLIContext.set_current(
                CLIContext(
                    config=loaded_config,
                    verbose=verbose,
                    quiet=quiet,
                    config_error=config_error,
                    logger=logger,
                )
            )
            try:
                app(tokens)
            finally:
                CLIContext.reset()

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `projdata` CLI."""
    app = create_app()
    app.meta()
