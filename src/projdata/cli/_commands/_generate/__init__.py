# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, FBT002, TC003
"""Generate command for writing the project metadata file."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from projdata.cli._commands._context import CLIContext
from projdata.cli._commands._shared import (
    ExitCode,
    apply_overrides,
    exit_with_error,
    require_config,
)
from projdata.config import Config
from projdata.exceptions import (
    ConfigValidationError,
    TemplateNotFoundError,
    ValidationError,
)
from projdata.metadata import GenerateProjectDataTask, Language
from projdata.templating import build_search_paths, create_environment

__all__ = ["app", "build_task"]

app = App(name="generate", help="Generate the project metadata file", help_on_error=True)


def build_task(config: Config, ctx: CLIContext) -> GenerateProjectDataTask:
    """Build the generation task from configuration.

    Args:
        config: Configuration with overrides applied.
        ctx: The active CLI context.

    Returns:
        A task writing into the configured output directory.
    """
    generate = config.generate

    extra_paths: list[Path] = []
    if generate.template_dir:
        extra_paths.append(config.resolve_path(generate.template_dir))

    return GenerateProjectDataTask(
        config.project.to_metadata(),
        config.resolve_path(generate.output_dir),
        state_file=config.resolve_path(generate.state_file),
        options=generate.to_render_options(),
        env=create_environment(build_search_paths(extra_paths)),
        logger=ctx.logger,
    )


@app.default
def _generate(
    *,
    group: Annotated[str | None, Parameter(help="Project group")] = None,
    name: Annotated[str | None, Parameter(help="Project name")] = None,
    project_version: Annotated[
        str | None, Parameter(name="--project-version", help="Project version")
    ] = None,
    description: Annotated[
        str | None, Parameter(help="Project description")
    ] = None,
    language: Annotated[
        Language | None, Parameter(help="Target language of the generated file")
    ] = None,
    package: Annotated[
        str | None, Parameter(help="Package or namespace of the generated file")
    ] = None,
    output_dir: Annotated[
        Path | None, Parameter(name="--output-dir", help="Output directory")
    ] = None,
    force: Annotated[
        bool, Parameter(help="Regenerate even if the output is up to date")
    ] = False,
) -> None:
    """Generate the project metadata file

    Validates the project version and writes a source file with the group,
    name, version and description as constants. The run is skipped when
    nothing changed since the last one.

    Args:
        group: Project group override.
        name: Project name override.
        project_version: Project version override.
        description: Project description override.
        language: Target language override.
        package: Package override.
        output_dir: Output directory override.
        force: Regenerate even if up to date.
    """
    ctx = CLIContext.get_current()
    config = require_config(ctx)

    try:
        config = apply_overrides(
            config,
            "project",
            {
                "group": group,
                "name": name,
                "version": project_version,
                "description": description,
            },
        )
        config = apply_overrides(
            config,
            "generate",
            {
                "language": language.value if language is not None else None,
                "package": package,
                "output_dir": str(output_dir) if output_dir is not None else None,
            },
        )
    except ConfigValidationError as e:
        exit_with_error(f"{e} (expected {e.expected})", ExitCode.VALIDATION_ERROR)

    task = build_task(config, ctx)

    try:
        outcome = task.run(force=force)
    except ValidationError as e:
        exit_with_error(f"{e}\nSolution: {e.solution}", ExitCode.VALIDATION_ERROR)
    except TemplateNotFoundError as e:
        exit_with_error(str(e), ExitCode.NOT_FOUND)
    except OSError as e:
        exit_with_error(f"Failed to write project data: {e}", ExitCode.IO_ERROR)

    if ctx.quiet:
        return

    if outcome.up_to_date:
        print(f"Up to date: {outcome.path}")
    else:
        print(f"Generated {outcome.path}")
    if ctx.verbose:
        print(f"Inputs hash: {outcome.inputs_hash}")
