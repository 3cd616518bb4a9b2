"""Logging for plaidkit, as a library and as a CLI."""
import logging
import os
import sys

ROOT_LOGGER = "plaidkit"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a plaidkit logger.

    Module loggers (e.g., 'plaidkit.client', 'plaidkit.decoder') never get a
    handler of their own. Until an application configures logging, the root
    'plaidkit' logger only carries a NullHandler, so library use stays quiet.
    Asking for the root logger itself (the CLI does) swaps that for a stdout
    handler, with the level taken from PLAIDKIT_LOG_LEVEL or LOG_LEVEL.
    """
    logger = logging.getLogger(name)
    root = logging.getLogger(ROOT_LOGGER)

    if name == ROOT_LOGGER:
        attach_console_handler(root)
    elif not root.handlers:
        root.addHandler(logging.NullHandler())

    return logger


def attach_console_handler(logger: logging.Logger) -> None:
    if any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        return

    for handler in [h for h in logger.handlers if isinstance(h, logging.NullHandler)]:
        logger.removeHandler(handler)

    level_name = os.getenv("PLAIDKIT_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.setLevel(level)
    logger.addHandler(handler)
