import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    # configure_logging detaches the package logger from root; undo it so
    # caplog sees records in later tests
    logger = logging.getLogger("inventory")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
