from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_reco_logger():
    yield
    logger = logging.getLogger("reco")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
