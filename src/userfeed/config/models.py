"""設定データクラス"""

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com/"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ApiConfig:
    """リモート API 接続設定"""

    base_url: str = DEFAULT_BASE_URL
    users_path: str = "users"
    connect_timeout_seconds: float = 15.0
    read_timeout_seconds: float = 60.0
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class MonitorConfig:
    """通信モニター設定

    Attributes:
        enabled: リクエスト/レスポンスの内容を出力するかどうか
        stream: 出力先（"stdout" または "stderr"）
    """

    enabled: bool = False
    stream: str = "stdout"


@dataclass
class OutputConfig:
    """出力設定"""

    indent: int = 2


@dataclass
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    loggers: dict[str, str] | None = None


@dataclass
class Config:
    """アプリケーション設定"""

    api: ApiConfig = field(default_factory=ApiConfig)
    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig | None = None
