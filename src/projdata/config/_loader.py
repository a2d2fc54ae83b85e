# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Reading, layering and environment parsing of configuration values."""

from __future__ import annotations

import copy
import os
import re
import tomllib
from typing import TYPE_CHECKING, Any, Final

from projdata.exceptions import ConfigLoadError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

ENV_PREFIX: Final[str] = "PROJDATA_"

# tomllib only exposes lineno/colno from Python 3.14 on; older releases put
# the position at the end of the message.
_TOML_POSITION: Final[re.Pattern[str]] = re.compile(r"at line (\d+), column (\d+)")


def _error_position(error: tomllib.TOMLDecodeError) -> tuple[int | None, int | None]:
    line: int | None = getattr(error, "lineno", None)
    if line is not None:
        return line, getattr(error, "colno", None)

    match = _TOML_POSITION.search(str(error))
    if match is None:
        return None, None
    return int(match[1]), int(match[2])


def read_toml_file(path: Path) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Read and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed TOML content as dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML. The error carries the
            line and column of the problem where tomllib reports them.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        line, column = _error_position(e)
        msg = f"Failed to parse TOML file {path}: {e}"
        raise ConfigLoadError(msg, path=path, line=line, column=column) from e


def deep_merge(
    base: Mapping[str, Any],  # pyright: ignore[reportExplicitAny]
    override: Mapping[str, Any],  # pyright: ignore[reportExplicitAny]
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Layer ``override`` over ``base`` and return the result as a new dict.

    Tables present on both sides are merged key by key. Any other value in
    ``override`` replaces the one in ``base``, lists included. Neither
    argument is modified.
    """
    merged: dict[str, Any] = copy.deepcopy(dict(base))  # pyright: ignore[reportExplicitAny]

    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)

    return merged


def parse_env_vars(
    environ: Mapping[str, str] | None = None,
    *,
    prefix: str = ENV_PREFIX,
) -> dict[str, dict[str, str]]:
    """Collect ``PROJDATA_<SECTION>__<KEY>`` variables into config sections.

    Section and key names are lowercased, so ``PROJDATA_PROJECT__VERSION``
    sets ``project.version``. Variables without the ``__`` separator (such as
    ``PROJDATA_DEBUG``) are control switches, not configuration, and are
    skipped. Values are kept as strings: a version like ``1.10`` must never
    be read as a number.

    Args:
        environ: Variables to read. Defaults to ``os.environ``.
        prefix: Variable name prefix.

    Returns:
        Section name to key/value mapping.
    """
    if environ is None:
        environ = os.environ

    sections: dict[str, dict[str, str]] = {}
    for name, value in environ.items():
        if not name.startswith(prefix):
            continue
        section, separator, key = name[len(prefix) :].lower().partition("__")
        if separator and section and key:
            sections.setdefault(section, {})[key] = value

    return sections
