# termifig/core/utils.py

"""Small helpers shared by the termifig core modules."""

import functools
import logging

logger = logging.getLogger("termifig")


def trace(func):
    """Decorator to log arguments to called function and the return value."""

    @functools.wraps(func)
    def decorator(*args, **kwargs):
        logger.debug("%s(%s, %s)", func.__name__, args, kwargs)
        ret = func(*args, **kwargs)
        logger.debug("%s returned %s", func.__name__, ret)
        return ret

    return decorator


def is_integer_token(value: str) -> bool:
    """Return True if value is an optionally signed run of decimal digits."""
    if value[:1] in ("-", "+"):
        value = value[1:]
    return value.isdigit()
