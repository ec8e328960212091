"""
Closed-form impermanent loss model for a yyAVAX/USDC pool.

Let k be the ratio of new to old AVAX price and g the growth of yyAVAX
against AVAX. Values are returned as fractions: -0.057 is a 5.7% loss
relative to holding.

Every function works on scalars and numpy arrays alike.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from il_explorer.config import (
    BASIC_SERIES,
    GRID_STEP,
    PRICE_COLUMN,
    YIELD_SERIES,
    YIELD_VS_HOLD_SERIES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoolParameters:
    yield_growth: float
    trading_fee_growth: float = 0.0
    farming_rewards_growth: float = 0.0
    initial_price: Optional[float] = None

    @property
    def fee_multiplier(self) -> float:
        return 1 + self.trading_fee_growth + self.farming_rewards_growth


# ============================================================
# Domain Checks
# ============================================================

def _check_price_ratio(k):
    k = np.asarray(k, dtype=float)
    if not np.all(np.isfinite(k)):
        raise ValueError("Price ratio k must be finite")
    if np.any(k < 0):
        raise ValueError("Price ratio k must be non-negative")
    return k


def _check_growth(value, name: str) -> None:
    if not np.isfinite(value):
        raise ValueError(f"{name} must be finite")
    if value < -1:
        raise ValueError(f"{name} must be >= -1")


def _check_parameters(params: PoolParameters) -> None:
    _check_growth(params.yield_growth, "yield_growth")
    _check_growth(params.trading_fee_growth, "trading_fee_growth")
    _check_growth(params.farming_rewards_growth, "farming_rewards_growth")

    if params.initial_price is not None:
        if not np.isfinite(params.initial_price) or params.initial_price < 0:
            raise ValueError("initial_price must be a non-negative number")


def _as_output(values):
    # 0-d arrays back to plain floats
    if np.ndim(values) == 0:
        return float(values)
    return values


# ============================================================
# Pool Value / HODL Value Ratios
# ============================================================

def _basic_ratio(k):
    return 2 * np.sqrt(k) / (1 + k)


def _yield_ratio(k, g):
    kg = k * (1 + g)
    return 2 * np.sqrt(kg) / (1 + kg)


def _yield_vs_hold_ratio(k, g):
    kg = k * (1 + g)
    return (k * g + 2) * np.sqrt(kg) / (1 + kg)


# ============================================================
# Impermanent Loss
# ============================================================

def impermanent_loss(k):
    """IL1 = 2*sqrt(k) / (1 + k) - 1 for an AVAX/USDC pool vs. holding."""
    k = _check_price_ratio(k)
    return _as_output(_basic_ratio(k) - 1)


def yield_impermanent_loss(k, g: float):
    """IL2 for a yyAVAX/USDC pool vs. holding yyAVAX and USDC.

    IL2 = 2*sqrt(k(1+g)) / (1 + k(1+g)) - 1
    """
    k = _check_price_ratio(k)
    _check_growth(g, "yield_growth")
    return _as_output(_yield_ratio(k, g) - 1)


def yield_vs_hold_loss(k, g: float):
    """IL3 for a yyAVAX/USDC pool vs. holding plain AVAX and USDC.

    IL3 = (2 + kg) * sqrt(k(1+g)) / (1 + k(1+g)) - 1

    Combines impermanent loss with the gain from yyAVAX accruing value
    against AVAX, so it can be positive.
    """
    k = _check_price_ratio(k)
    _check_growth(g, "yield_growth")
    return _as_output(_yield_vs_hold_ratio(k, g) - 1)


def net_loss_gain(il, trading_fee_growth: float, farming_rewards_growth: float):
    """Net = (IL + 1)(1 + t + f) - 1."""
    _check_growth(trading_fee_growth, "trading_fee_growth")
    _check_growth(farming_rewards_growth, "farming_rewards_growth")
    il = np.asarray(il, dtype=float)
    return _as_output(
        (il + 1) * (1 + trading_fee_growth + farming_rewards_growth) - 1
    )


# ============================================================
# Sample Grid & Curve Rows
# ============================================================

def sample_grid(points: int) -> np.ndarray:
    """Price ratios 0.00, 0.01, ..., 0.01 * points."""
    if points < 0:
        raise ValueError("points must be non-negative")
    return GRID_STEP * np.arange(points + 1)


def generate_curve(params: PoolParameters, points: int = 400) -> pd.DataFrame:
    """
    Evaluate the three loss curves over the sample grid.

    Returns one row per grid point with columns:
    - k
    - New AVAX Price (only when params.initial_price is set)
    - one column per series

    Trading fee and farming reward growth are netted into every series,
    so with t = f = 0 the columns are IL1, IL2, IL3.
    """
    _check_parameters(params)

    k = sample_grid(points)
    g = params.yield_growth
    multiplier = params.fee_multiplier

    curve = pd.DataFrame({"k": k})

    if params.initial_price is not None:
        curve[PRICE_COLUMN] = k * params.initial_price

    curve[BASIC_SERIES] = _basic_ratio(k) * multiplier - 1
    curve[YIELD_SERIES] = _yield_ratio(k, g) * multiplier - 1
    curve[YIELD_VS_HOLD_SERIES] = _yield_vs_hold_ratio(k, g) * multiplier - 1

    logger.debug(
        "Generated %d curve rows (g=%.4f, t=%.4f, f=%.4f)",
        len(curve),
        g,
        params.trading_fee_growth,
        params.farming_rewards_growth,
    )

    return curve
