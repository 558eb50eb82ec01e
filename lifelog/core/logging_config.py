"""
Logging helpers.

Services log through ``log_info`` / ``log_warning`` / ``log_error`` and pass
structured context as keyword arguments, which is rendered as ``key=value``
pairs after the message.
"""
import logging
from typing import Any, Optional, Union

LOGGER_NAME = "lifelog"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: Union[str, int] = "INFO", handler: Optional[logging.Handler] = None) -> logging.Logger:
    """Configure the lifelog logger once; repeated calls only adjust the level."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    if handler is not None:
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        logger.addHandler(handler)
    elif not logger.handlers:
        default_handler = logging.StreamHandler()
        default_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(default_handler)
    return logger


def _format_context(context: dict[str, Any]) -> str:
    if not context:
        return ""
    pairs = " ".join(f"{key}={value}" for key, value in context.items() if value is not None)
    return f" | {pairs}" if pairs else ""


def log_info(message: str, **context: Any) -> None:
    logger.info(f"{message}{_format_context(context)}")


def log_warning(message: str, **context: Any) -> None:
    logger.warning(f"{message}{_format_context(context)}")


def log_debug(message: str, **context: Any) -> None:
    logger.debug(f"{message}{_format_context(context)}")


def log_error(error: Union[BaseException, str], **context: Any) -> None:
    """Log an error; exceptions are logged with their traceback."""
    if isinstance(error, BaseException):
        logger.error(
            f"{type(error).__name__}: {error}{_format_context(context)}",
            exc_info=(type(error), error, error.__traceback__),
        )
    else:
        logger.error(f"{error}{_format_context(context)}")
