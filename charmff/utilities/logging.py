"""Logging helpers for the charmff command line and scripts."""

import logging

from charmff.qcdlib import config_loader as cfg


def configure_logger(name="charmff", level=None):
    """
    Configure and return a logger with a simple format.

    The level defaults to the 'logging.level' entry of config.yaml. Library
    modules only create child loggers (logging.getLogger(__name__)), so
    configuring "charmff" once covers all of them.
    """
    if level is None:
        level = cfg.log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
