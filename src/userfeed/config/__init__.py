"""設定管理モジュール"""

from userfeed.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
    parse_config,
)
from userfeed.config.models import (
    ApiConfig,
    Config,
    LoggingConfig,
    MonitorConfig,
    OutputConfig,
)

__all__ = [
    "ApiConfig",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LoggingConfig",
    "MonitorConfig",
    "OutputConfig",
    "expand_env_vars",
    "load_config",
    "parse_config",
]
