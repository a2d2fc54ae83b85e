# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false, reportUnknownMemberType=false, reportUnknownVariableType=false
"""Validation of configuration values against the pydantic models.

Lenient validation ignores unknown sections and keys so that config files
written for newer releases still load. Strict validation, used when
``PROJDATA_STRICT_CONFIG=1``, rejects them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import ConfigDict, ValidationError as PydanticValidationError

from projdata.exceptions import ConfigValidationError

from ._models import Config, GenerateConfig, LoggingConfig, ProjectConfig

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from pydantic_core import ErrorDetails

    from ._discovery import ConfigSource

_FORBID_EXTRA: ConfigDict = ConfigDict(frozen=True, extra="forbid")


class _StrictProjectConfig(ProjectConfig):
    model_config: ClassVar[ConfigDict] = _FORBID_EXTRA


class _StrictGenerateConfig(GenerateConfig):
    model_config: ClassVar[ConfigDict] = _FORBID_EXTRA


class _StrictLoggingConfig(LoggingConfig):
    model_config: ClassVar[ConfigDict] = _FORBID_EXTRA


class StrictConfig(Config):
    """Configuration that rejects unknown sections and keys."""

    model_config: ClassVar[ConfigDict] = _FORBID_EXTRA

    project: _StrictProjectConfig = _StrictProjectConfig()
    generate: _StrictGenerateConfig = _StrictGenerateConfig()
    logging: _StrictLoggingConfig = _StrictLoggingConfig()


def _expected(error: ErrorDetails) -> str:
    ctx = error.get("ctx") or {}
    if "expected" in ctx:
        return str(ctx["expected"])
    if "pattern" in ctx:
        return f"pattern: {ctx['pattern']}"
    return error["msg"]


def _lookup(values: Mapping[str, Any], path: tuple[str, ...]) -> bool:
    current: Any = values
    for part in path:
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    return True


def _source_of(
    path: tuple[str, ...], sources: Sequence[ConfigSource]
) -> str | None:
    """Return the highest-precedence layer that set the key at ``path``."""
    for source in sources:
        if _lookup(source.values, path):
            return source.label
    return None


def validate_config(
    data: Mapping[str, Any],
    *,
    strict: bool = False,
    sources: Sequence[ConfigSource] = (),
) -> Config:
    """Validate configuration values into a :class:`Config`.

    Args:
        data: Merged configuration values.
        strict: Reject unknown sections and keys.
        sources: Layers the values were merged from, used to name the
            origin of an invalid value.

    Returns:
        The validated configuration, without a project root.

    Raises:
        ConfigValidationError: For the first invalid value.
    """
    model = StrictConfig if strict else Config

    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        path = tuple(str(part) for part in error["loc"])
        key = ".".join(path)
        msg = f"Invalid configuration value for '{key}'"
        raise ConfigValidationError(
            msg,
            key=key,
            value=error.get("input"),
            expected=_expected(error),
            source=_source_of(path, sources),
        ) from e


def get_config_schema(*, strict: bool = False) -> dict[str, Any]:
    """Return the JSON Schema of the configuration file."""
    model = StrictConfig if strict else Config
    return model.model_json_schema()
