"""
Logging configuration for the application.

``setup_logging`` configures the root logger with a console handler once.
Request lines are written by the ``board.requests`` logger; in production the
line is terse (method, path, status) and elsewhere it also carries timing.
"""

import logging

REQUEST_LOGGER_NAME = "board.requests"

VERBOSE_REQUEST_FORMAT = "%(method)s %(path)s %(status)s %(duration).3f ms"
TERSE_REQUEST_FORMAT = "%(method)s %(path)s %(status)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger unless handlers are already attached.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``). Case insensitive.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)


def request_log_format(verbose: bool) -> str:
    return VERBOSE_REQUEST_FORMAT if verbose else TERSE_REQUEST_FORMAT
