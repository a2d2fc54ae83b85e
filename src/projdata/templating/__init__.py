r"""projdata templating.

Jinja2-based rendering of the generated metadata files. Built-in templates
live in ``templates/`` and are named after the target language
(``kotlin.j2``, ``java.j2``, ``python.j2``). Extra template directories
take precedence over the built-in ones.

Basic usage:
    from projdata.metadata import ProjectMetadata, RenderOptions
    from projdata.templating import render_metadata

    content = render_metadata(
        ProjectMetadata(group="com.example", name="demo", version="1.2.3"),
        RenderOptions(),
    )
"""

from ._environment import (
    BUILTIN_TEMPLATES_DIR,
    build_search_paths,
    create_environment,
)
from ._filters import string_literal
from ._renderer import (
    FORMAT_VERSION,
    build_context,
    render_metadata,
)

__all__ = [
    "BUILTIN_TEMPLATES_DIR",
    "FORMAT_VERSION",
    "build_context",
    "build_search_paths",
    "create_environment",
    "render_metadata",
    "string_literal",
]
