# pyright: reportExplicitAny=false, reportAny=false
"""The merged projdata configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr

from projdata.config._discovery import (
    ConfigSource,
    discover_sources,
    find_project_root,
)
from projdata.config._loader import deep_merge

from ._generate import GenerateConfig
from ._logging import LoggingConfig
from ._project import ProjectConfig

if TYPE_CHECKING:
    from collections.abc import Mapping


class Config(BaseModel):
    """Merged configuration with typed sections.

    Instances are immutable. Build them with :meth:`from_dict` or
    :meth:`load`, which validate the values and remember the project root
    that relative paths resolve against.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    project: ProjectConfig = ProjectConfig()
    generate: GenerateConfig = GenerateConfig()
    logging: LoggingConfig = LoggingConfig()

    _root: Path | None = PrivateAttr(default=None)
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        root: Path | None = None,
        strict: bool = False,
    ) -> Config:
        """Validate a configuration mapping.

        Args:
            data: Configuration values. Missing keys take their defaults.
            root: Project root for resolving relative paths.
            strict: Reject unknown sections and keys.

        Raises:
            ConfigValidationError: If a value is invalid.
        """
        from projdata.config._validation import validate_config  # noqa: PLC0415

        config = validate_config(data, strict=strict)
        config._root = root
        return config

    @classmethod
    def load(
        cls,
        *,
        project_root: Path | None = None,
        config_file: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
        strict: bool = False,
    ) -> Config:
        """Read and merge every configuration layer.

        Layers are merged defaults < user < project < env < cli. When
        ``config_file`` is given it takes the place of the project's
        projdata.toml and its directory becomes the project root, unless
        ``project_root`` is also given.

        Args:
            project_root: Project root. Found by searching upward for
                projdata.toml when omitted.
            config_file: Explicit project config file.
            include_env: Read the ``PROJDATA_*`` environment variables.
            cli_overrides: Command-line values, the highest layer.
            strict: Reject unknown sections and keys.

        Raises:
            ConfigLoadError: If a config file is not valid TOML.
            ConfigValidationError: If the merged values are invalid. The
                error names the layer that set the offending key.
            OSError: If a config file cannot be read.
        """
        from projdata.config._validation import validate_config  # noqa: PLC0415

        root = project_root
        if root is None:
            root = config_file.parent if config_file is not None else find_project_root()

        sources = discover_sources(
            root,
            config_file=config_file,
            include_env=include_env,
            cli_overrides=cli_overrides,
        )

        merged: dict[str, Any] = {}
        for source in reversed(sources):
            merged = deep_merge(merged, source.values)

        config = validate_config(merged, strict=strict, sources=sources)
        config._root = root
        config._sources = tuple(sources)
        return config

    @property
    def root(self) -> Path:
        """Return the project root, falling back to the current directory."""
        return self._root if self._root is not None else Path.cwd()

    @property
    def sources(self) -> list[ConfigSource]:
        """Return the layers read by :meth:`load`, highest precedence first."""
        return list(self._sources)

    def resolve_path(self, value: str) -> Path:
        """Resolve a configured path against the project root."""
        path = Path(value).expanduser()
        return path if path.is_absolute() else self.root / path

    def with_values(self, section: str, values: Mapping[str, Any]) -> Config:
        """Return a copy with ``values`` set in ``section``, revalidated.

        Raises:
            ConfigValidationError: If a new value is invalid.
        """
        updated = Config.from_dict(
            deep_merge(self.to_dict(), {section: dict(values)}), root=self._root
        )
        updated._sources = self._sources
        return updated

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as plain TOML-compatible values."""
        return self.model_dump(mode="json")

    def to_toml(self) -> str:
        return tomli_w.dumps(self.to_dict())
