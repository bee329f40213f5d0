"""
Tests of the logging helper.
"""

import logging

from charmff.utilities import configure_logger, tcolors


def test_configure_logger():
    logger = configure_logger("charmff.test_utilities", "DEBUG")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    #--a second call reuses the handler
    logger = configure_logger("charmff.test_utilities", logging.INFO)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_default_level():
    logger = configure_logger("charmff.test_utilities_default")
    assert logger.level == logging.WARNING
    assert tcolors.ENDC == "\033[0m"
