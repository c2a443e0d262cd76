from loguru import logger
import sys
from measured.core.config import settings

# Library code stays silent until the host application opts in
logger.disable("measured")


def configure_logging():
    """
    Enable measured's log output and add its own sinks.

    Adds a stderr sink at settings.LOG_LEVEL and, when settings.LOG_FILE is
    set, a rotating file sink. Handlers installed by the host application are
    left untouched.

    Returns:
        List of the added handler ids, for logger.remove()
    """
    logger.enable("measured")
    handler_ids = [
        logger.add(
            sys.stderr,
            format="<green>{time}</green> | <level>{level}</level> | <cyan>{message}</cyan>",
            level=settings.LOG_LEVEL,
            filter="measured",
        )
    ]

    if settings.LOG_FILE:
        handler_ids.append(
            logger.add(
                settings.LOG_FILE,
                level=settings.LOG_LEVEL,
                rotation="1 day",
                retention="7 days",
                compression="zip",
                format="{time} | {level} | {message}",
                filter="measured",
            )
        )

    return handler_ids


__all__ = ["logger", "configure_logging"]
