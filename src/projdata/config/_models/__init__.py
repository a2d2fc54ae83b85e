"""Configuration models."""

from ._config import Config
from ._generate import DEFAULT_OUTPUT_DIR, DEFAULT_STATE_FILE, GenerateConfig
from ._logging import LogFormat, LoggingConfig, LogLevel
from ._project import ProjectConfig

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_STATE_FILE",
    "Config",
    "GenerateConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ProjectConfig",
]
