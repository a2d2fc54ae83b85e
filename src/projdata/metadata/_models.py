"""Metadata models.

ProjectMetadata holds the four values written into the generated file.
RenderOptions controls how they are rendered.
"""

import re
from enum import StrEnum
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict

DEFAULT_DESCRIPTION: Final[str] = ""
DEFAULT_OBJECT_NAME: Final[str] = "Project"

IDENTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[A-Za-z_][A-Za-z0-9_]*$", re.ASCII
)
PACKAGE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$", re.ASCII
)


class Language(StrEnum):
    """Target languages for the generated source file."""

    KOTLIN = "kotlin"
    PYTHON = "python"
    JAVA = "java"


class ProjectMetadata(BaseModel):
    """Project metadata embedded in the generated file.

    Attributes:
        group: Project group (e.g. "com.example").
        name: Project name.
        version: Project version, checked against the semver grammar at
            generation time.
        description: Free-form description.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    group: str
    name: str
    version: str
    description: str = DEFAULT_DESCRIPTION


class RenderOptions(BaseModel):
    """Rendering options for the generated file.

    Attributes:
        language: Target language.
        package: Package or namespace header. Empty means use the group.
            Checked against PACKAGE_PATTERN at generation time.
        object_name: Name of the object holding the constants. Checked
            against IDENTIFIER_PATTERN at generation time.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    language: Language = Language.KOTLIN
    package: str = ""
    object_name: str = DEFAULT_OBJECT_NAME

    def resolve_package(self, metadata: ProjectMetadata) -> str:
        return self.package or metadata.group

    def file_name(self) -> str:
        """Return the conventional file name for the target language."""
        if self.language == Language.PYTHON:
            # Python modules are lowercase
            return f"{self.object_name.lower()}.py"
        return f"{self.object_name}{_EXTENSIONS[self.language]}"


_EXTENSIONS: Final[dict[Language, str]] = {
    Language.KOTLIN: ".kt",
    Language.JAVA: ".java",
    Language.PYTHON: ".py",
}
