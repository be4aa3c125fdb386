import logging

from fkt.logger.logger import logger, setup_logger


def stream_handlers(target):
    return [h for h in target.handlers if type(h) is logging.StreamHandler]


def test_default_logger():
    assert logger.name == "fkt"
    assert logger.propagate is False
    assert len(stream_handlers(logger)) == 1


def test_setup_logger_configures_once():
    first = setup_logger("fkt.tests.once", level="debug")
    second = setup_logger("fkt.tests.once", level="error")
    assert first is second
    assert len(stream_handlers(first)) == 1
    assert first.level == logging.DEBUG


def test_setup_logger_ignores_foreign_handlers():
    target = logging.getLogger("fkt.tests.foreign")
    target.addHandler(logging.NullHandler())
    configured = setup_logger("fkt.tests.foreign")
    assert configured is target
    assert len(stream_handlers(configured)) == 1
