import logging

import pytest

from lazypatch.engines.loggers import NodeFormatter


@pytest.fixture(autouse=True)
def _caplog_all_levels(caplog):
    caplog.set_level(0)


@pytest.fixture(autouse=True)
def _clear_own_handlers():
    logger = logging.getLogger()
    original_level = logger.level
    yield
    logger.handlers[:] = [
        handler for handler in logger.handlers
        if not isinstance(handler, logging.StreamHandler) or
           not isinstance(handler.formatter, NodeFormatter)
    ]
    logger.setLevel(original_level)
    logging.getLogger('lazypatch').setLevel(logging.NOTSET)
