"""Shared utilities."""

from ._logging import LogFormatType, cli_logger

__all__ = ["LogFormatType", "cli_logger"]
