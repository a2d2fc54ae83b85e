"""Project metadata validation and source generation.

Example:
    from pathlib import Path
    from projdata.metadata import ProjectMetadata, generate_project_data
    metadata = ProjectMetadata(group="com.example", name="demo", version="1.2.3")
    generate_project_data(metadata, Path("build/generated/Project.kt"))
"""

from ._generator import (
    INVALID_OBJECT_NAME_ID,
    INVALID_PACKAGE_ID,
    UNENCODABLE_TEXT_ID,
    generate_project_data,
    validate_metadata,
    validate_render_options,
)
from ._models import (
    DEFAULT_DESCRIPTION,
    DEFAULT_OBJECT_NAME,
    IDENTIFIER_PATTERN,
    PACKAGE_PATTERN,
    Language,
    ProjectMetadata,
    RenderOptions,
)
from ._semver import (
    EXAMPLE_VERSION,
    INVALID_VERSION_ID,
    SEMVER_PATTERN,
    is_valid_version,
    validate_version,
)
from ._task import GenerateProjectDataTask, GenerationOutcome

__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_OBJECT_NAME",
    "EXAMPLE_VERSION",
    "IDENTIFIER_PATTERN",
    "INVALID_OBJECT_NAME_ID",
    "INVALID_PACKAGE_ID",
    "INVALID_VERSION_ID",
    "PACKAGE_PATTERN",
    "SEMVER_PATTERN",
    "UNENCODABLE_TEXT_ID",
    "GenerateProjectDataTask",
    "GenerationOutcome",
    "Language",
    "ProjectMetadata",
    "RenderOptions",
    "generate_project_data",
    "is_valid_version",
    "validate_metadata",
    "validate_render_options",
    "validate_version",
]
