import logging

import pytest

from clamm_core.decimals import FixedPoint, Liquidity
from clamm_core.logging import logger
from clamm_core.pool import Pool


@pytest.fixture(scope="session", autouse=True)
def _set_clamm_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)


@pytest.fixture
def fee_pool() -> Pool:
    """
    A pool with a 20% protocol fee and 10 units of liquidity
    """
    return Pool(
        protocol_fee=FixedPoint.from_scale(2, 1),
        liquidity=Liquidity.from_integer(10),
    )
