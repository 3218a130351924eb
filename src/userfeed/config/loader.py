"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from userfeed.config.models import (
    DEFAULT_LOG_FORMAT,
    ApiConfig,
    Config,
    LoggingConfig,
    MonitorConfig,
    OutputConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

MONITOR_STREAMS = ("stdout", "stderr")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する"""
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない
    """
    if field not in data or data[field] is None:
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _section(data: dict[str, Any], name: str) -> dict[str, Any] | None:
    """任意セクションを取得する（mapping 以外はエラー）"""
    section = data.get(name)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigValidationError(f"Section '{name}' must be a mapping")
    return section


def _positive_number(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigValidationError(f"'{path}' must be a positive number")
    return float(value)


def _boolean(value: Any, path: str) -> bool:
    """真偽値を検証する

    環境変数展開後の文字列 "true" / "false"（大文字小文字を区別しない）も受け付ける。
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ConfigValidationError(f"'{path}' must be a boolean")


def _non_empty_string(value: Any, path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigValidationError(f"'{path}' must be a non-empty string")
    return value


def _load_api(api_data: dict[str, Any]) -> ApiConfig:
    base_url = _validate_required_field(api_data, "base_url", "api")
    if not str(base_url).startswith(("http://", "https://")):
        raise ConfigValidationError(
            "'api.base_url' must start with http:// or https://"
        )

    headers = api_data.get("headers") or {}
    if not isinstance(headers, dict):
        raise ConfigValidationError("'api.headers' must be a mapping")

    return ApiConfig(
        base_url=str(base_url),
        users_path=_non_empty_string(
            api_data.get("users_path", "users"), "api.users_path"
        ),
        connect_timeout_seconds=_positive_number(
            api_data.get("connect_timeout_seconds", 15.0),
            "api.connect_timeout_seconds",
        ),
        read_timeout_seconds=_positive_number(
            api_data.get("read_timeout_seconds", 60.0), "api.read_timeout_seconds"
        ),
        headers={str(key): str(value) for key, value in headers.items()},
    )


def parse_config(data: dict[str, Any] | None) -> Config:
    """展開済みの設定 dict から Config を組み立てる

    Args:
        data: YAML から読み込んだデータ（None は空設定として扱う）

    Returns:
        Config オブジェクト

    Raises:
        ConfigValidationError: 設定値が不正
    """
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigValidationError("Config root must be a mapping")

    config = Config()

    api_data = _section(data, "api")
    if api_data is not None:
        config.api = _load_api(api_data)

    monitor_data = _section(data, "monitor")
    if monitor_data is not None:
        stream = monitor_data.get("stream", "stdout")
        if stream not in MONITOR_STREAMS:
            raise ConfigValidationError(
                f"'monitor.stream' must be one of {', '.join(MONITOR_STREAMS)}"
            )
        config.monitor = MonitorConfig(
            enabled=_boolean(
                monitor_data.get("enabled", False), "monitor.enabled"
            ),
            stream=stream,
        )

    output_data = _section(data, "output")
    if output_data is not None:
        indent = output_data.get("indent", 2)
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise ConfigValidationError("'output.indent' must be a non-negative integer")
        config.output = OutputConfig(indent=indent)

    # LoggingConfig (optional)
    logging_data = _section(data, "logging")
    if logging_data:
        config.logging = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get("format", DEFAULT_LOG_FORMAT),
            loggers=logging_data.get("loggers"),
        )

    return config


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    ファイルが存在しない場合はデフォルト設定を返す。

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        ConfigValidationError: 設定値が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        return Config()

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f)

    # 環境変数を展開
    return parse_config(_expand_recursive(raw_data))
