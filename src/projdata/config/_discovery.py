# pyright: reportExplicitAny=false
"""Locating and reading the configuration layers.

The layers, highest precedence first, are command-line overrides, the
``PROJDATA_*`` environment, the project's ``projdata.toml`` (or the file
passed with ``--config``), the per-user config file and the built-in
defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, Final

import platformdirs

from ._loader import parse_env_vars, read_toml_file

PROJECT_CONFIG_NAME: Final[str] = "projdata.toml"


class ConfigSourceName(StrEnum):
    """Configuration layers, ordered from highest to lowest precedence."""

    CLI = "cli"
    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """One configuration layer as read for the current run.

    Attributes:
        name: Which layer this is.
        path: The file behind the layer, None for cli, env and defaults.
        exists: Whether the layer contributed anything (file present,
            variables set, overrides given).
        values: The raw values of the layer.
    """

    name: ConfigSourceName
    path: Path | None = None
    exists: bool = False
    values: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        """Return the file path, or the layer name for non-file layers."""
        return str(self.path) if self.path is not None else self.name.value


def find_project_root(start: Path | None = None) -> Path | None:
    """Search upward from ``start`` for a directory holding projdata.toml.

    Args:
        start: Directory to start from. Defaults to the current directory.

    Returns:
        The project root, or None if the filesystem root is reached first.
    """
    current = (start or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        if (directory / PROJECT_CONFIG_NAME).is_file():
            return directory
    return None


def get_user_config_path() -> Path:
    r"""Return the per-user config file, whether or not it exists.

    Typically ``~/.config/projdata/config.toml`` on Linux,
    ``~/Library/Application Support/projdata/config.toml`` on macOS and
    ``%APPDATA%\projdata\config.toml`` on Windows.
    """
    return platformdirs.user_config_path("projdata") / "config.toml"


def _read_file_source(name: ConfigSourceName, path: Path) -> ConfigSource:
    if not path.is_file():
        return ConfigSource(name=name, path=path)
    return ConfigSource(name=name, path=path, exists=True, values=read_toml_file(path))


def discover_sources(
    project_root: Path | None = None,
    *,
    config_file: Path | None = None,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,
) -> list[ConfigSource]:
    """Read every configuration layer, highest precedence first.

    File layers that do not exist are still listed, with ``exists=False``.

    Args:
        project_root: Directory holding projdata.toml. Found by searching
            upward from the current directory when omitted.
        config_file: Explicit project config file. Replaces the discovered
            projdata.toml; every other layer is still read.
        include_env: Read the ``PROJDATA_*`` environment variables.
        cli_overrides: Values given on the command line. The cli layer is
            only listed when this is not None.

    Returns:
        The layers in precedence order.

    Raises:
        ConfigLoadError: If a config file is not valid TOML.
        OSError: If a config file cannot be read.
    """
    from ._models import Config  # noqa: PLC0415

    sources: list[ConfigSource] = []

    if cli_overrides is not None:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                exists=bool(cli_overrides),
                values=cli_overrides,
            )
        )

    if include_env:
        env_values = parse_env_vars()
        sources.append(
            ConfigSource(
                name=ConfigSourceName.ENV,
                exists=bool(env_values),
                values=dict(env_values),
            )
        )

    if config_file is None:
        root = project_root or find_project_root()
        if root is not None:
            config_file = root / PROJECT_CONFIG_NAME
    if config_file is not None:
        sources.append(_read_file_source(ConfigSourceName.PROJECT, config_file))

    sources.append(_read_file_source(ConfigSourceName.USER, get_user_config_path()))
    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT, exists=True, values=Config().to_dict()
        )
    )

    return sources
