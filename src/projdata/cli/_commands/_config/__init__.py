# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, A002
"""Config commands for inspecting projdata configuration."""

from collections.abc import Callable
from enum import StrEnum
from typing import Annotated, Any

import orjson
import tomli_w
import yaml
from cyclopts import App, Parameter

from projdata.cli._commands._context import CLIContext
from projdata.cli._commands._shared import require_config
from projdata.config import get_config_schema

__all__ = ["OutputFormat", "app"]


class OutputFormat(StrEnum):
    """Output formats of ``config show``."""

    TOML = "toml"
    JSON = "json"
    YAML = "yaml"


def _to_json(data: dict[str, Any]) -> str:
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")


def _to_yaml(data: dict[str, Any]) -> str:
    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True)


_FORMATTERS: dict[OutputFormat, Callable[[dict[str, Any]], str]] = {
    OutputFormat.TOML: tomli_w.dumps,
    OutputFormat.JSON: _to_json,
    OutputFormat.YAML: _to_yaml,
}

app = App(name="config", help="Inspect projdata configuration", help_on_error=True)


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json, yaml)"),
    ] = OutputFormat.TOML,
) -> None:
    """Show the merged configuration

    Args:
        format: Output format.
    """
    config = require_config(CLIContext.get_current())

    print(_FORMATTERS[format](config.to_dict()).rstrip())


@app.command(name="sources")
def _sources() -> None:
    """List the configuration sources in precedence order"""
    ctx = CLIContext.get_current()

    for source in ctx.config.sources:
        location = str(source.path) if source.path is not None else "-"
        status = "loaded" if source.exists else "absent"
        print(f"{source.name.value:<8} {status:<7} {location}")


@app.command(name="schema")
def _schema(
    *,
    strict: Annotated[bool, Parameter(help="Reject unknown keys")] = False,
) -> None:
    """Print the JSON Schema of the configuration file

    Args:
        strict: Emit the schema that rejects unknown keys.
    """
    print(_to_json(get_config_schema(strict=strict)))
