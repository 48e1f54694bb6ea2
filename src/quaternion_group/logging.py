"""
Logging — логгеры модулей quaternion_group

StreamHandler в stderr, уровень по умолчанию WARNING;
переопределяется переменной окружения QUATERNION_GROUP_LOG_LEVEL.
"""

import logging
import os

LOG_LEVEL_ENV = "QUATERNION_GROUP_LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Library default is WARNING, override with QUATERNION_GROUP_LOG_LEVEL
    default_level = logging.WARNING
    level_name = os.getenv(LOG_LEVEL_ENV, logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = default_level

    logger.setLevel(level)
    return logger
