"""Jinja2 Environment factory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from ._filters import string_literal

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jinja2 import Environment

BUILTIN_TEMPLATES_DIR: Final[Path] = Path(__file__).parent / "templates"


def build_search_paths(extra_paths: Sequence[Path] = ()) -> tuple[Path, ...]:
    """Build the template search path, highest precedence first.

    Extra paths that are not directories are skipped. The built-in templates
    directory is always last so user templates can override it.

    Args:
        extra_paths: Additional template directories.

    Returns:
        Ordered tuple of template directories.
    """
    paths = [p for p in extra_paths if p.is_dir()]
    paths.append(BUILTIN_TEMPLATES_DIR)
    return tuple(paths)


def create_environment(search_paths: tuple[Path, ...] | None = None) -> Environment:
    """Create the Jinja2 Environment used to render metadata files.

    Autoescaping is off since the templates produce source code, not HTML.
    Undefined variables are errors, block tags leave no stray whitespace,
    and output always uses LF line endings. The ``string_literal`` filter
    is registered for quoting values.

    Args:
        search_paths: Template search paths. Defaults to the built-in
            templates only.

    Returns:
        Configured Jinja2 Environment.
    """
    from jinja2 import Environment, FileSystemLoader, StrictUndefined  # noqa: PLC0415

    if search_paths is None:
        search_paths = build_search_paths()

    env: Environment = Environment(
        loader=FileSystemLoader([str(p) for p in search_paths]),
        autoescape=False,  # noqa: S701
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        newline_sequence="\n",
    )
    env.filters["string_literal"] = string_literal

    return env
