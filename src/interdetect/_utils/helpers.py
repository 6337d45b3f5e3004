"""
General-purpose utilities and temporary helpers.

Methods
-------
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.
verbose_context(logger, verbose)
    Returns ``temp_log_level(logger, INFO)`` when ``verbose`` is set,
    a null context otherwise.
"""

import logging
from contextlib import contextmanager, nullcontext


@contextmanager
def temp_log_level(logger, level):
    """
    Temporarily sets the logging level of a logger within a context.

    Parameters
    ----------
    logger : logging.Logger
        The logger whose level will be temporarily changed.
    level : int
        The logging level to set (e.g., logging.INFO, logging.DEBUG).

    Usage
    -----
    >>> import logging
    >>> logger = logging.getLogger("interdetect.screening")
    >>> with temp_log_level(logger, logging.INFO):
    ...     logger.info("This will be shown if logger level was lower before")
    ...
    # After the context, logger level is restored to its original value.

    Notes
    -----
    After exiting the context, the original log level is always restored,
    even if an exception occurs.
    """
    old_level = logger.level
    logger.setLevel(level)
    try:
        yield
    finally:
        logger.setLevel(old_level)


def verbose_context(logger, verbose: bool):
    """Context enabling INFO messages of ``logger`` when ``verbose`` is True."""
    if verbose:
        return temp_log_level(logger, logging.INFO)
    return nullcontext()
