from loguru import logger
import os

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"

_active_settings: tuple | None = None
_sink_ids: list[int] = []


def setup_logger(log_level: str = "INFO", log_path: str | None = None):
    """Route loguru output to the console and, optionally, a rotating file."""
    global _active_settings, _sink_ids

    settings = (log_level.upper(), log_path)
    if settings == _active_settings:
        return logger

    if _active_settings is None:
        # first call: drop loguru's default stderr handler
        logger.remove()
    else:
        for sink_id in _sink_ids:
            logger.remove(sink_id)

    sink_ids = [
        logger.add(
            lambda msg: print(msg, end=""),
            colorize=True,
            level=settings[0],
            format=LOG_FORMAT,
        )
    ]

    if log_path:
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        sink_ids.append(
            logger.add(
                log_path,
                rotation="10 MB",
                retention="7 days",
                level=settings[0],
                format=LOG_FORMAT,
            )
        )

    _sink_ids = sink_ids
    _active_settings = settings
    return logger


def configure_logging(config):
    """Apply ``log_level`` / ``log_path`` of a loaded ``Config``."""
    return setup_logger(config.log_level, config.log_path)
