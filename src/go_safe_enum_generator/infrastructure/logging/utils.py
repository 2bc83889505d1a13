#!/usr/bin/env python3

"""Logging utility functions and decorators."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_timing(
    func: F | None = None, *, expected: tuple[type[BaseException], ...] = ()
) -> Any:
    """
    Decorator logging how long a pipeline step took, in milliseconds.

    Usable bare (``@log_timing``) or with the exceptions the step is allowed
    to raise (``@log_timing(expected=(NoDeclarationsError,))``). Expected
    failures are reported by the caller, so they are only traced at DEBUG;
    anything else is logged as an error before being re-raised.

    Args:
        func: Function to decorate
        expected: Exception types that are part of the step's contract

    Returns:
        Wrapped function, or a decorator when called with keyword arguments only
    """
    if func is None:
        return lambda f: log_timing(f, expected=expected)

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__

        logger.debug(f"Starting {func_name}")
        start_time = perf_counter()

        try:
            result = func(*args, **kwargs)
        except expected as e:
            elapsed_ms = (perf_counter() - start_time) * 1000
            logger.debug(f"{func_name} stopped after {elapsed_ms:.1f}ms: {e}")
            raise
        except Exception as e:
            elapsed_ms = (perf_counter() - start_time) * 1000
            logger.error(f"Failed {func_name} after {elapsed_ms:.1f}ms: {e}")
            raise

        elapsed_ms = (perf_counter() - start_time) * 1000
        logger.debug(f"Completed {func_name} in {elapsed_ms:.1f}ms")
        return result

    return cast("F", wrapper)
