"""Logging utility for vincenty"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('vincenty')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNED = set()


def warn_once(warning: str) -> bool:
    """
    Logs a warning on the package logger the first time a given message is seen.

    Args:
        warning:
            The warning message

    Returns:
        (bool) True if the warning was emitted, False if it had already been seen
    """
    if warning in _WARNED:
        return False

    LOGGER.warning(warning)
    _WARNED.add(warning)
    return True
