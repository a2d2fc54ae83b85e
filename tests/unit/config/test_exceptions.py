from pathlib import Path

from projdata.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    ProjdataError,
    TemplateNotFoundError,
    ValidationError,
)


class TestExceptionHierarchy:
    def test_config_errors_are_projdata_errors(self) -> None:
        assert issubclass(ConfigError, ProjdataError)
        assert issubclass(ConfigLoadError, ConfigError)
        assert issubclass(ConfigValidationError, ConfigError)

    def test_validation_error_is_value_error(self) -> None:
        assert issubclass(ValidationError, ProjdataError)
        assert issubclass(ValidationError, ValueError)

    def test_template_not_found_is_lookup_error(self) -> None:
        assert issubclass(TemplateNotFoundError, ProjdataError)
        assert issubclass(TemplateNotFoundError, LookupError)


class TestConfigLoadError:
    def test_location_defaults_to_none(self) -> None:
        error = ConfigLoadError("boom")

        assert error.path is None
        assert error.line is None
        assert error.column is None

    def test_stores_location(self) -> None:
        error = ConfigLoadError("boom", path=Path("/a.toml"), line=3, column=7)

        assert str(error) == "boom"
        assert error.path == Path("/a.toml")
        assert (error.line, error.column) == (3, 7)


class TestConfigValidationError:
    def test_stores_context(self) -> None:
        error = ConfigValidationError(
            "bad", key="logging.level", value="loud", expected="debug, info"
        )

        assert error.key == "logging.level"
        assert error.value == "loud"
        assert error.expected == "debug, info"
        assert error.source is None


class TestValidationError:
    def test_stores_context(self) -> None:
        error = ValidationError(
            "bad version",
            field="version",
            value="1.0",
            problem_id="invalid-version",
            solution="use 1.0.0",
        )

        assert str(error) == "bad version"
        assert error.field == "version"
        assert error.value == "1.0"
        assert error.problem_id == "invalid-version"
        assert error.solution == "use 1.0.0"
