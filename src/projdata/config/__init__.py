"""projdata configuration.

Layered TOML configuration: built-in defaults, the per-user config file,
the project's ``projdata.toml``, ``PROJDATA_<SECTION>__<KEY>`` environment
variables and command-line overrides, each layer overriding the previous.

Example:
    >>> from projdata.config import Config
    >>> config = Config.load()
    >>> config.generate.language
    <Language.KOTLIN: 'kotlin'>
"""

from projdata.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._discovery import (
    PROJECT_CONFIG_NAME,
    ConfigSource,
    ConfigSourceName,
    discover_sources,
    find_project_root,
    get_user_config_path,
)
from ._load import STRICT_CONFIG_VAR, safe_load_config, strict_config_enabled
from ._loader import ENV_PREFIX, deep_merge, parse_env_vars, read_toml_file
from ._models import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_STATE_FILE,
    Config,
    GenerateConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    ProjectConfig,
)
from ._validation import StrictConfig, get_config_schema, validate_config

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_STATE_FILE",
    "ENV_PREFIX",
    "PROJECT_CONFIG_NAME",
    "STRICT_CONFIG_VAR",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "GenerateConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ProjectConfig",
    "StrictConfig",
    "deep_merge",
    "discover_sources",
    "find_project_root",
    "get_config_schema",
    "get_user_config_path",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
    "strict_config_enabled",
    "validate_config",
]
