import logging

from flask import Flask

from common.logging import ROOT_LOGGER, get_logger, install_request_logging


def test_module_loggers_share_the_parent_handler():
    logger = get_logger("plugins.unit_converter.core.converter")
    assert logger.name == f"{ROOT_LOGGER}.plugins.unit_converter.core.converter"
    assert logger.handlers == []
    assert len(logging.getLogger(ROOT_LOGGER).handlers) == 1
    assert get_logger(f"{ROOT_LOGGER}.cli").name == f"{ROOT_LOGGER}.cli"


def test_site_log_level_reaches_module_loggers():
    parent = logging.getLogger(ROOT_LOGGER)
    previous = parent.level
    try:
        install_request_logging(Flask(__name__), level="warning")
        child = get_logger("plugins.unit_detector.core.detector")
        assert child.getEffectiveLevel() == logging.WARNING
        assert not child.isEnabledFor(logging.INFO)
    finally:
        parent.setLevel(previous)
