import pytest
from pydantic import ValidationError as PydanticValidationError

from projdata.config import GenerateConfig, LogFormat, LoggingConfig, ProjectConfig
from projdata.metadata import Language, ProjectMetadata, RenderOptions


class TestProjectConfig:
    def test_to_metadata(self) -> None:
        config = ProjectConfig(
            group="com.example", name="demo", version="1.2.3", description="Demo"
        )

        assert config.to_metadata() == ProjectMetadata(
            group="com.example", name="demo", version="1.2.3", description="Demo"
        )

    def test_description_defaults_to_empty(self) -> None:
        assert ProjectConfig().to_metadata().description == ""


class TestGenerateConfig:
    def test_to_render_options(self) -> None:
        config = GenerateConfig(
            language=Language.JAVA, package="org.demo", object_name="BuildInfo"
        )

        assert config.to_render_options() == RenderOptions(
            language=Language.JAVA, package="org.demo", object_name="BuildInfo"
        )

    @pytest.mark.parametrize("object_name", ["Project", "_Meta", "Build2"])
    def test_accepts_identifier_object_names(self, object_name: str) -> None:
        assert GenerateConfig(object_name=object_name).object_name == object_name

    @pytest.mark.parametrize("object_name", ["", "2Build", "Build Info", "a-b"])
    def test_rejects_non_identifier_object_names(self, object_name: str) -> None:
        with pytest.raises(PydanticValidationError):
            _ = GenerateConfig(object_name=object_name)


class TestLoggingConfig:
    def test_defaults_to_text_on_stderr(self) -> None:
        config = LoggingConfig()

        assert config.format == LogFormat.TEXT
        assert config.file == ""
