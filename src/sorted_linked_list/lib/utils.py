import os
import typing as t
import logging

import coloredlogs


LOG_LEVEL_ENV: t.Final[str] = 'SORTED_LINKED_LIST_LOG_LEVEL'
DEFAULT_LOG_LEVEL: t.Final[str] = 'INFO'

_ASCII_LOWER: t.Final = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz'
)

_installed: 'list[logging.Logger]' = []


def sign(x: int, /) -> int:
    return (x > 0) - (x < 0)


def three_way(a: t.Any, b: t.Any, /) -> int:
    return (a > b) - (a < b)


def ascii_lower(s: str, /) -> str:
    """Lowercase ``A-Z`` only, leaving every other code point untouched.

    Mirrors C ``strcasecmp`` folding, so ``'É'`` is not folded to ``'é'``.
    """
    return s.translate(_ASCII_LOWER)


def _checked_level(name: str, /) -> str:
    # getLevelName maps known names to ints and unknown ones to a string
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def log_level() -> str:
    return _checked_level(os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper())


def get_logger(name: str, /) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(log_level())
    coloredlogs.install(level=log_level(), logger=logger)
    _installed.append(logger)
    return logger


def configure_logging(level: t.Optional[str] = None) -> str:
    """Re-apply the log level to every package logger.

    Args:
        level (`str`, optional): Level name. Read from the environment when omitted.

    Returns:
        `str`: The level that was applied
    """
    level_ = _checked_level((level or log_level()).upper())
    for logger in _installed:
        logger.setLevel(level_)
        coloredlogs.install(level=level_, logger=logger)
    return level_
