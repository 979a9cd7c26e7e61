import logging

import pytest

from treeset import OrderedSet
from treeset.logger import logger

@pytest.fixture
def empty_set():
    return OrderedSet()

@pytest.fixture
def numbers():
    return OrderedSet([50, 20, 80, 10, 30, 70, 90, 30])

@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger=logger.name)
    yield caplog
