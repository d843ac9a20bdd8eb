"""Logging utilities for encodex modules."""

import logging
from typing import Optional

ROOT_LOGGER_NAME = 'encodex'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get an encodex logger that inherits from the root logger.

    Names are placed under the ``encodex`` namespace, so ``get_logger('input')``
    and ``get_logger('encodex.input')`` return the same logger. The logger
    propagates to root and only gets a default WARNING level when
    basicConfig() hasn't been called yet.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    if not name or name == ROOT_LOGGER_NAME:
        full_name = ROOT_LOGGER_NAME
    elif name.startswith(ROOT_LOGGER_NAME + '.'):
        full_name = name
    else:
        full_name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(full_name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    return logger
