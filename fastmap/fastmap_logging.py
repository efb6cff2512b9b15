"""This provides logging functionality for fastmap.

It is modeled on the default `logging approach that comes with Python <https://docs.python.org/library/logging.html>`_.
All loggers created here hang below a single package logger, so an application
can silence or enable fastmap with one call. Nothing is configured on import.
"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO

__all__ = [
    "DEBUG",
    "DEFAULT_LEVEL",
    "INFO",
    "LOGGER_NAME",
    "create_module_logger",
    "function_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]
LOGGER_NAME = "FASTMAP"
DEFAULT_LEVEL = DEBUG

_rootlogger = None


def create_module_logger(name: str | None = None):
    """Helper function for creating a module logger.

    Args:
        name (str): The name to be given to the logger. If the name is None, the name defaults to the name of the module.

    """
    if name is None:
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        name = mod.__name__
    logger_name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(logger_name)


def get_module_logger(name: str):
    """Helper function for getting the module logger.

    Args:
        name (str): The name of the module in which the method being decorated is located

    """
    logger_name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(logger_name)


def get_rootlogger():
    """Return the logger configured by log_to_stderr, or None."""
    return _rootlogger


def method_logger(name: str):
    """Decorator for adding debug logging to a method.

    Args:
        name (str): The name of the module in which the method being decorated is located

    """
    logger = get_module_logger(name)
    classname = inspect.getouterframes(inspect.currentframe())[1][3]

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # first argument is the instance
            logger.debug(
                f"calling {classname}.{func.__name__} with {args[1::]} and {kwargs}"
            )
            res = func(*args, **kwargs)
            return res

        return wrapper

    return real_decorator


def function_logger(name):
    """Decorator for adding debug logging to a function.

    Args:
        name (str): The name of the module in which the function being decorated is located

    """
    logger = get_module_logger(name)

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug(f"calling {func.__name__} with {args} and {kwargs}")
            res = func(*args, **kwargs)
            return res

        return wrapper

    return real_decorator


def log_to_stderr(level: int | None = None, pass_root_logger_level: bool = False):
    """Log to stderr.

    Args:
        level (int): The minimum level of the messages that get logged
        pass_root_logger_level (bool): boolean indicating whether to pass the root logger level

    Returns:
        the package root logger
    """
    global _rootlogger

    if not level:
        level = DEFAULT_LEVEL

    logger = logging.getLogger(LOGGER_NAME)
    if pass_root_logger_level:
        logger.propagate = True
        logger.setLevel(level)
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter("[%(levelname)s][%(name)s] %(message)s")
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    _rootlogger = logger

    return logger
