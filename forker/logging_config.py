"""Logging setup and timing helpers for the forker."""

import logging
import os
import sys
import time
from contextlib import contextmanager
from functools import wraps
from typing import Awaitable, Callable, Generator, Optional, TypeVar

from .config import Config, get_config

SIMPLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

T = TypeVar("T")


def resolve_log_level(level: Optional[str] = None, config: Optional[Config] = None) -> int:
    """Pick a logging level.

    Precedence: the explicit `level`, then `config.log_level`, then the
    LOG_LEVEL env var, then INFO. Unknown names resolve to INFO.
    """
    level_name = (
        level
        or (config.log_level if config is not None else None)
        or os.environ.get(LOG_LEVEL_ENV)
        or DEFAULT_LOG_LEVEL
    )
    resolved = logging.getLevelName(level_name.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Optional[str] = None, config: Optional[Config] = None) -> int:
    """Configure the root logger.

    Args:
        level: Level name overriding everything else.
        config: Configuration whose `log_level` applies when `level` is not
            given. Defaults to the loaded project config.

    Returns:
        The level that was applied.
    """
    if config is None:
        config = get_config()
    log_level = resolve_log_level(level, config)

    logging.basicConfig(
        level=log_level,
        format=DETAILED_FORMAT if log_level <= logging.DEBUG else SIMPLE_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    return log_level


@contextmanager
def log_timing(
    logger: logging.Logger, operation: str, level: int = logging.DEBUG
) -> Generator[None, None, None]:
    """Log how long the enclosed block took.

    Example:
        with log_timing(logger, "Select messages"):
            selected = select_messages(tree, target_id, option)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.log(level, "%s completed in %.1fms", operation, (time.perf_counter() - start) * 1000)


def timed(
    operation: Optional[str] = None, level: int = logging.DEBUG
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorate a coroutine function so each call logs its duration.

    The message goes to the logger of the decorated function's module; the
    operation name defaults to the function name.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        op_name = operation or func.__name__
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            with log_timing(logger, op_name, level):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
