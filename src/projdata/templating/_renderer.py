"""Template rendering engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, cast

from projdata.exceptions import TemplateNotFoundError

if TYPE_CHECKING:
    from jinja2 import Environment

    from projdata.metadata import ProjectMetadata, RenderOptions

# Bump when the layout of the generated files changes.
FORMAT_VERSION: Final[int] = 2


def build_context(
    metadata: ProjectMetadata,
    options: RenderOptions,
) -> dict[str, object]:
    """Build the template context for a metadata file.

    Args:
        metadata: The project metadata.
        options: Rendering options.

    Returns:
        Template variables, including the resolved package and format version.
    """
    return {
        **metadata.model_dump(),
        "language": options.language.value,
        "package": options.resolve_package(metadata),
        "object_name": options.object_name,
        "format_version": FORMAT_VERSION,
    }


def render_metadata(
    metadata: ProjectMetadata,
    options: RenderOptions,
    *,
    env: Environment | None = None,
) -> str:
    """Render the metadata source file for the configured language.

    Args:
        metadata: The project metadata.
        options: Rendering options.
        env: Optional Jinja2 Environment. Defaults to the built-in templates.

    Returns:
        The rendered file content.

    Raises:
        TemplateNotFoundError: If no template exists for the language.
    """
    from jinja2 import TemplateNotFound  # noqa: PLC0415

    from ._environment import create_environment  # noqa: PLC0415

    if env is None:
        env = create_environment()

    template_name = f"{options.language.value}.j2"
    try:
        template = env.get_template(template_name)
    except TemplateNotFound as e:
        msg = f"No template found for language '{options.language.value}'"
        raise TemplateNotFoundError(msg, language=options.language.value) from e

    return cast("str", template.render(build_context(metadata, options)))
