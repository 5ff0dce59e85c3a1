import itertools
import logging

import pytest


class FixedRandom:
    """Random source that replays a fixed sequence of floats forever"""

    def __init__(self, values):
        self.values = list(values)
        self._cycle = itertools.cycle(self.values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._cycle)


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom sources"""
    return FixedRandom


@pytest.fixture
def zero_random():
    return FixedRandom([0.0])


@pytest.fixture(autouse=True)
def reset_package_logger():
    # CLI runs attach handlers bound to the captured streams of one test
    yield
    logger = logging.getLogger("mockgen")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
