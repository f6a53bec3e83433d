import sys

from loguru import logger

from jenkins_tracker.config import LogLevelType
from jenkins_tracker.log.sensitive import sensitive_log_filter


def setup_logger(level: LogLevelType, *secrets: str) -> None:
    """
    Route loguru to stdout, masking known secret shapes and the given secrets.
    """
    sensitive_log_filter.hide_sensitive_strings(*secrets)
    logger.remove()
    _stdout_loguru_handler(level)


def _stdout_loguru_handler(level: LogLevelType) -> None:
    logger_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<level>{message}</level>"
    )
    if level == "DEBUG":
        logger_format += " | {extra}"

    logger.add(
        sys.stderr,
        level=level.upper(),
        format=logger_format,
        diagnose=False,  # hide variable values in log backtrace
        filter=sensitive_log_filter.create_filter(full_hide=True),
    )
