# ============================================================
# Impermanent Loss Curve Table Generator
# ============================================================

import logging
import os

import numpy as np
import pandas as pd

from il_explorer.config import (
    DEFAULT_FARMING_REWARDS_GROWTH,
    DEFAULT_INITIAL_PRICE,
    DEFAULT_TRADING_FEE_GROWTH,
    PRICE_VARIANT,
    RATIO_VARIANT,
    RESULTS_DIR,
    SERIES,
)
from il_explorer.logs import configure_logging
from il_explorer.model import PoolParameters, generate_curve

configure_logging()
logger = logging.getLogger("il_explorer.generate_results")

# ==============================
# USER PARAMETERS
# ==============================

initial_price = DEFAULT_INITIAL_PRICE
trading_fee_growth = DEFAULT_TRADING_FEE_GROWTH
farming_rewards_growth = DEFAULT_FARMING_REWARDS_GROWTH

yield_growth_grid = np.round(np.linspace(0.0, 0.5, 11), 4)
reference_k = [0.25, 0.5, 1.0, 2.0, 4.0]

os.makedirs(RESULTS_DIR, exist_ok=True)

# ============================================================
# 1. PRICE-BASED CURVES (fees & rewards netted in)
# ============================================================

price_frames = []

for g in yield_growth_grid:
    params = PoolParameters(
        yield_growth=float(g),
        trading_fee_growth=trading_fee_growth,
        farming_rewards_growth=farming_rewards_growth,
        initial_price=initial_price,
    )
    curve = generate_curve(params, points=PRICE_VARIANT.points)
    curve.insert(0, "yield_growth", g)
    price_frames.append(curve)

df_price = pd.concat(price_frames, ignore_index=True)
df_price.to_csv(os.path.join(RESULTS_DIR, "il_curves_price_variant.csv"), index=False)

# ============================================================
# 2. RATIO-BASED CURVES (IL only)
# ============================================================

ratio_frames = []

for g in yield_growth_grid:
    curve = generate_curve(PoolParameters(yield_growth=float(g)), points=RATIO_VARIANT.points)
    curve.insert(0, "yield_growth", g)
    ratio_frames.append(curve)

df_ratio = pd.concat(ratio_frames, ignore_index=True)
df_ratio.to_csv(os.path.join(RESULTS_DIR, "il_curves_ratio_variant.csv"), index=False)

# ============================================================
# 3. LOSS AT REFERENCE PRICE RATIOS
# ============================================================

# grid k values are 0.01 * i, so match on the rounded ratio
df_ratio["k_rounded"] = df_ratio["k"].round(2)

df_reference = (
    df_ratio[df_ratio["k_rounded"].isin(reference_k)]
    .loc[:, ["yield_growth", "k_rounded", *SERIES]]
    .rename(columns={"k_rounded": "k"})
    .reset_index(drop=True)
)

df_reference.to_csv(os.path.join(RESULTS_DIR, "il_at_reference_k.csv"), index=False)

logger.info(
    "Wrote %d price rows, %d ratio rows, %d reference rows to %s",
    len(df_price),
    len(df_ratio),
    len(df_reference),
    RESULTS_DIR,
)

print("All impermanent loss CSV files generated successfully.")
