"""Loguru sink configuration."""

import sys

from loguru import logger

from src.usermanagement.runtime.config.config_data import LoggingConfig

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(config: LoggingConfig) -> list[int]:
    """Replace the default loguru sink with the configured ones.

    Returns the ids of the added sinks.
    """
    level = config.level.upper()
    serialize = config.format == "json"

    logger.remove()
    sink_ids = [
        logger.add(
            sink=sys.stderr,
            level=level,
            format=PLAIN_FORMAT,
            colorize=not serialize,
            serialize=serialize,
        )
    ]

    if config.file:
        sink_ids.append(
            logger.add(
                config.file,
                level=level,
                format=PLAIN_FORMAT,
                serialize=serialize,
                rotation=f"{config.max_size_mb} MB",
                retention=config.backup_count,
                encoding="utf-8",
            )
        )

    logger.debug("Logging configured at level {} ({} sinks)", level, len(sink_ids))
    return sink_ids
