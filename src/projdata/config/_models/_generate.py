"""Generate configuration model."""

from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field

from projdata.metadata import (
    DEFAULT_OBJECT_NAME,
    IDENTIFIER_PATTERN,
    Language,
    RenderOptions,
)

DEFAULT_OUTPUT_DIR: Final[str] = "build/generated/projdata"
DEFAULT_STATE_FILE: Final[str] = "build/projdata/state.json"


class GenerateConfig(BaseModel):
    """Generate configuration section.

    Paths are relative to the project root.

    Attributes:
        language: Target language of the generated file.
        package: Package or namespace header (empty uses the project group).
        object_name: Name of the generated object.
        output_dir: Directory of the generated file.
        state_file: Record of the last run, used for up-to-date checks.
        template_dir: Extra template directory searched before the built-ins.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    language: Language = Language.KOTLIN
    package: str = ""
    object_name: str = Field(
        default=DEFAULT_OBJECT_NAME, pattern=IDENTIFIER_PATTERN.pattern
    )
    output_dir: str = DEFAULT_OUTPUT_DIR
    state_file: str = DEFAULT_STATE_FILE
    template_dir: str = ""

    def to_render_options(self) -> RenderOptions:
        return RenderOptions(
            language=self.language,
            package=self.package,
            object_name=self.object_name,
        )
