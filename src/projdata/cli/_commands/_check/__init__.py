# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415
"""Check command for validating project metadata without writing."""

from typing import Annotated

from cyclopts import App, Parameter

from projdata.cli._commands._context import CLIContext
from projdata.cli._commands._shared import (
    ExitCode,
    apply_overrides,
    exit_with_error,
    require_config,
)
from projdata.exceptions import ConfigValidationError, ValidationError
from projdata.metadata import validate_metadata

__all__ = ["app"]

app = App(name="check", help="Validate the project metadata", help_on_error=True)


@app.default
def _check(
    *,
    project_version: Annotated[
        str | None, Parameter(name="--project-version", help="Version to check")
    ] = None,
) -> None:
    """Validate the project metadata

    Checks the group, name and semantic version, then the package and
    object name of the generated file. Nothing is written.

    Args:
        project_version: Version to check instead of the configured one.
    """
    ctx = CLIContext.get_current()
    config = require_config(ctx)

    try:
        config = apply_overrides(config, "project", {"version": project_version})
    except ConfigValidationError as e:
        exit_with_error(f"{e} (expected {e.expected})", ExitCode.VALIDATION_ERROR)

    metadata = config.project.to_metadata()
    try:
        validate_metadata(metadata, config.generate.to_render_options())
    except ValidationError as e:
        exit_with_error(f"{e}\nSolution: {e.solution}", ExitCode.VALIDATION_ERROR)

    if not ctx.quiet:
        print(f"OK: {metadata.group}:{metadata.name}:{metadata.version}")
