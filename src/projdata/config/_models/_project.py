"""Project configuration model.

This module provides the ProjectConfig Pydantic model for the metadata
values written into the generated file.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from projdata.metadata import DEFAULT_DESCRIPTION, ProjectMetadata


class ProjectConfig(BaseModel):
    """Project configuration section.

    Attributes:
        group: Project group.
        name: Project name.
        version: Project version.
        description: Project description.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    group: str = ""
    name: str = ""
    version: str = ""
    description: str = DEFAULT_DESCRIPTION

    def to_metadata(self) -> ProjectMetadata:
        return ProjectMetadata(
            group=self.group,
            name=self.name,
            version=self.version,
            description=self.description,
        )
