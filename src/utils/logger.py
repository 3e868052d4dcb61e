from enum import Enum
from functools import wraps
import logging
from typing import Any, Callable
from itertools import chain

from loguru import logger
from returns.result import Failure, Success

from settings import get_settings


def _debug_function_signature(func: Callable[..., Any], *args, **kwargs):
    """Log the function signature."""
    signature = ", ".join(
        chain(
            (repr(arg) for arg in args),
            (f"{key}={repr(value)}" for key, value in kwargs.items()),
        )
    )
    logger.debug(f"Calling {func.__name__}({signature})")


class FailureLevel(Enum):
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def log_failure(failure_message: str, failure_level: FailureLevel, error: str) -> None:
    logger.debug(f"{failure_message}: {error}")
    match failure_level:
        case FailureLevel.WARNING:
            logger.warning(failure_message)
        case FailureLevel.ERROR:
            logger.error(failure_message)
        case FailureLevel.CRITICAL:
            logger.critical(failure_message)


def log_railway_function(
    failure_message: str,
    success_message: str | None = None,
    failure_level: FailureLevel = FailureLevel.ERROR,
):
    """
    Log the outcome of a function returning a ``returns`` container.

    :param failure_message: Logged at ``failure_level`` when the result is a `Failure`.
    :param success_message: Logged at info level when the result is a `Success`.
    :param failure_level: Log level used for failures.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if get_settings().verbose_logging:
                _debug_function_signature(func, *args, **kwargs)
            result = func(*args, **kwargs)
            match result:
                case Success():
                    if success_message:
                        logger.info(success_message)
                case Failure(error):
                    log_failure(failure_message, failure_level, str(error))
            return result

        return wrapper

    return decorator
