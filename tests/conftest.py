from pathlib import Path

import pytest

from il_explorer.config import (
    DEFAULT_FARMING_REWARDS_GROWTH,
    DEFAULT_INITIAL_PRICE,
    DEFAULT_TRADING_FEE_GROWTH,
    PRICE_VARIANT,
    RATIO_VARIANT,
)
from il_explorer.model import PoolParameters

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def price_params() -> PoolParameters:
    return PoolParameters(
        yield_growth=PRICE_VARIANT.default_yield_growth,
        trading_fee_growth=DEFAULT_TRADING_FEE_GROWTH,
        farming_rewards_growth=DEFAULT_FARMING_REWARDS_GROWTH,
        initial_price=DEFAULT_INITIAL_PRICE,
    )


@pytest.fixture
def ratio_params() -> PoolParameters:
    return PoolParameters(yield_growth=RATIO_VARIANT.default_yield_growth)


@pytest.fixture
def repo_root() -> Path:
    return REPO_ROOT
