"""アプリケーションのエントリポイント"""

import logging
import sys
from pathlib import Path

from userfeed.application.use_cases import DumpUsersUseCase
from userfeed.config import Config, ConfigError, LoggingConfig, load_config
from userfeed.infrastructure.http import (
    HttpUserRepository,
    TrafficMonitor,
    WebServiceClient,
    WebServiceError,
)

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CONFIG_PATH = Path("config.yaml")


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    root_logger = logging.getLogger()

    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def create_client(config: Config) -> WebServiceClient:
    """Create the web service client described by config."""
    monitor: TrafficMonitor | None = None
    if config.monitor.enabled:
        stream = sys.stderr if config.monitor.stream == "stderr" else sys.stdout
        monitor = TrafficMonitor(stream)

    return WebServiceClient(
        base_url=config.api.base_url,
        headers=config.api.headers,
        connect_timeout=config.api.connect_timeout_seconds,
        read_timeout=config.api.read_timeout_seconds,
        monitor=monitor,
    )


def main() -> None:
    """ユーザー一覧を取得して標準出力に書き出す"""
    try:
        config = load_config(CONFIG_PATH)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        sys.exit(1)

    configure_logging(config.logging)

    logger.info("Fetching users from %s", config.api.base_url)

    with create_client(config) as client:
        repository = HttpUserRepository(client, users_path=config.api.users_path)
        use_case = DumpUsersUseCase(
            user_repository=repository,
            output=sys.stdout,
            indent=config.output.indent,
        )
        try:
            use_case.execute()
        except WebServiceError:
            logger.exception("Failed to dump users")
            sys.exit(1)


if __name__ == "__main__":
    main()
