"""Metadata file generation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from projdata.exceptions import ValidationError

from ._models import IDENTIFIER_PATTERN, PACKAGE_PATTERN, RenderOptions
from ._semver import validate_version

if TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment
    from structlog.typing import FilteringBoundLogger

    from ._models import ProjectMetadata

_REQUIRED_FIELDS = ("group", "name")
_TEXT_FIELDS = ("group", "name", "version", "description")

UNENCODABLE_TEXT_ID: Final[str] = "unencodable-text"
INVALID_PACKAGE_ID: Final[str] = "invalid-package"
INVALID_OBJECT_NAME_ID: Final[str] = "invalid-object-name"


def _check_encodable(field: str, value: str) -> None:
    # Lone surrogates come from undecodable bytes in argv or the environment.
    try:
        _ = value.encode("utf-8")
    except UnicodeEncodeError as e:
        msg = (
            f"The project {field} contains a character that cannot be written "
            f"as UTF-8 at position {e.start}"
        )
        raise ValidationError(
            msg,
            field=field,
            value=value,
            problem_id=UNENCODABLE_TEXT_ID,
            solution=f"Provide the project {field} as valid UTF-8 text",
        ) from e


def validate_render_options(metadata: ProjectMetadata, options: RenderOptions) -> None:
    """Check that the package and object name are valid identifiers.

    The package is checked after falling back to the group, so a group such
    as ``io.my-org`` needs an explicit package.

    Raises:
        ValidationError: With problem id ``invalid-package`` or
            ``invalid-object-name``.
    """
    package = options.resolve_package(metadata)
    if not PACKAGE_PATTERN.fullmatch(package):
        msg = f"The package {package!r} is not a dot-separated list of identifiers"
        raise ValidationError(
            msg,
            field="package",
            value=package,
            problem_id=INVALID_PACKAGE_ID,
            solution="Set a valid package (example: 'package = \"com.example.demo\"')",
        )

    if not IDENTIFIER_PATTERN.fullmatch(options.object_name):
        msg = f"The object name {options.object_name!r} is not an identifier"
        raise ValidationError(
            msg,
            field="object_name",
            value=options.object_name,
            problem_id=INVALID_OBJECT_NAME_ID,
            solution="Set a valid object name (example: 'object_name = \"Project\"')",
        )


def validate_metadata(
    metadata: ProjectMetadata, options: RenderOptions | None = None
) -> None:
    """Validate project metadata before generation.

    Args:
        metadata: The metadata to check.
        options: Rendering options to check along with the metadata.

    Raises:
        ValidationError: If group or name is empty, a value is not valid
            UTF-8 text, the version does not match the semver grammar, or
            the package or object name is not a valid identifier.
    """
    for field in _REQUIRED_FIELDS:
        value: str = getattr(metadata, field)
        if not value.strip():
            msg = f"The project {field} must not be empty"
            raise ValidationError(
                msg,
                field=field,
                value=value,
                problem_id=f"missing-{field}",
                solution=f"Provide a project {field} (example: '{field} = \"demo\"')",
            )

    for field in _TEXT_FIELDS:
        _check_encodable(field, getattr(metadata, field))

    validate_version(metadata.version)

    if options is not None:
        validate_render_options(metadata, options)


def generate_project_data(
    metadata: ProjectMetadata,
    output_path: Path,
    *,
    options: RenderOptions | None = None,
    env: Environment | None = None,
    logger: FilteringBoundLogger | None = None,
) -> None:
    """Validate metadata and write the generated source file.

    Parent directories are created as needed and an existing file is
    overwritten. Identical inputs always produce byte-identical output.

    Args:
        metadata: The project metadata to embed.
        output_path: Path of the file to write.
        options: Rendering options. Defaults to Kotlin output.
        env: Optional Jinja2 Environment for template lookup.
        logger: Optional structured logger.

    Raises:
        ValidationError: If the metadata or options are invalid. Nothing is
            written.
        TemplateNotFoundError: If no template exists for the language.
        OSError: If the file cannot be written.
    """
    from projdata.templating import render_metadata  # noqa: PLC0415

    if options is None:
        options = RenderOptions()

    validate_metadata(metadata, options)

    content = render_metadata(metadata, options, env=env)

    if logger is not None:
        logger.info(
            "generating_project_data",
            path=str(output_path),
            language=options.language.value,
            group=metadata.group,
            name=metadata.name,
            version=metadata.version,
            description=metadata.description,
        )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    _ = output_path.write_text(content, encoding="utf-8", newline="\n")
