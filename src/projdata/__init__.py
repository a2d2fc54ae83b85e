"""projdata: generate a source file embedding project metadata."""

from projdata.exceptions import ProjdataError, TemplateNotFoundError, ValidationError
from projdata.metadata import (
    GenerateProjectDataTask,
    GenerationOutcome,
    Language,
    ProjectMetadata,
    RenderOptions,
    generate_project_data,
    is_valid_version,
    validate_metadata,
    validate_version,
)

__all__ = [
    "GenerateProjectDataTask",
    "GenerationOutcome",
    "Language",
    "ProjdataError",
    "ProjectMetadata",
    "RenderOptions",
    "TemplateNotFoundError",
    "ValidationError",
    "generate_project_data",
    "is_valid_version",
    "validate_metadata",
    "validate_version",
]
