import os
from dataclasses import dataclass

# ============================================================
# Runtime Settings
# ============================================================

LOG_LEVEL = os.getenv("IL_LOG_LEVEL", "INFO")
RESULTS_DIR = os.getenv("IL_RESULTS_DIR", ".")

MARKET_TICKER = "AVAX-USD"
MARKET_CACHE_SECONDS = 3600

# ============================================================
# Parameter Ranges
# ============================================================

GRID_STEP = 0.01

PRICE_MIN = 0
PRICE_MAX = 100
PRICE_STEP = 1
DEFAULT_INITIAL_PRICE = 30

GROWTH_MIN = 0.0
GROWTH_MAX = 0.5
GROWTH_STEP = 0.0001

DEFAULT_TRADING_FEE_GROWTH = 0.15
DEFAULT_FARMING_REWARDS_GROWTH = 0.08

# ============================================================
# Series
# ============================================================

PRICE_COLUMN = "New AVAX Price"

BASIC_SERIES = "AVAX/USDC pool vs. holding AVAX and USDC"
YIELD_SERIES = "yyAVAX/USDC pool vs. holding yyAVAX and USDC"
YIELD_VS_HOLD_SERIES = "yyAVAX/USDC pool vs. holding AVAX and USDC"

SERIES = (BASIC_SERIES, YIELD_SERIES, YIELD_VS_HOLD_SERIES)

AVAX_RED = "#E84142"
INFO_BLUE = "#29B6F6"
PRIMARY = "#F0B90B"
REFERENCE_GREY = "rgba(255, 255, 255, 0.38)"

SERIES_COLORS = {
    BASIC_SERIES: AVAX_RED,
    YIELD_SERIES: INFO_BLUE,
    YIELD_VS_HOLD_SERIES: PRIMARY,
}

Y_RANGE = (-1.0, 0.5)
Y_TICKS = (-1.0, -0.75, -0.5, -0.25, 0.0, 0.25, 0.5)


# ============================================================
# Page Variants
# ============================================================

@dataclass(frozen=True)
class CurveVariant:
    """Layout of one version of the page.

    The price-based variant plots against the new AVAX price and nets
    trading fee and farming reward growth into every series. The
    ratio-based variant plots raw impermanent loss against k.
    """

    name: str
    points: int
    default_yield_growth: float
    price_axis: bool
    fee_growth: bool


PRICE_VARIANT = CurveVariant(
    name="Price-based (fees & rewards)",
    points=400,
    default_yield_growth=0.09,
    price_axis=True,
    fee_growth=True,
)

RATIO_VARIANT = CurveVariant(
    name="Ratio-based (IL only)",
    points=500,
    default_yield_growth=0.05,
    price_axis=False,
    fee_growth=False,
)

VARIANTS = (PRICE_VARIANT, RATIO_VARIANT)
