import logging

import streamlit as st

from il_explorer.charts import loss_curve_figure, percent_label
from il_explorer.config import (
    AVAX_RED,
    DEFAULT_FARMING_REWARDS_GROWTH,
    DEFAULT_INITIAL_PRICE,
    DEFAULT_TRADING_FEE_GROWTH,
    GROWTH_MAX,
    GROWTH_MIN,
    GROWTH_STEP,
    INFO_BLUE,
    MARKET_CACHE_SECONDS,
    MARKET_TICKER,
    PRICE_MAX,
    PRICE_MIN,
    PRICE_STEP,
    PRIMARY,
    VARIANTS,
)
from il_explorer.formulas import (
    NET_LOSS_GAIN,
    PRICE_RATIO,
    SERIES_FORMULAS,
    YIELD_GROWTH,
)
from il_explorer.logs import configure_logging
from il_explorer.market import latest_close
from il_explorer.model import PoolParameters, generate_curve

configure_logging()
logger = logging.getLogger("il_explorer.app")

st.set_page_config(page_title="yyAVAX Impermanent Loss", layout="wide")


@st.cache_data(ttl=MARKET_CACHE_SECONDS, show_spinner=False)
def cached_latest_close(ticker):
    return latest_close(ticker)


# ============================================================
# Sidebar Controls
# ============================================================

st.sidebar.title("IL Explorer")

variant_name = st.sidebar.radio(
    "Chart Variant",
    [v.name for v in VARIANTS],
    index=0
)
variant = next(v for v in VARIANTS if v.name == variant_name)

initial_price = None
trading_fee_growth = 0.0
farming_rewards_growth = 0.0

if variant.price_axis:

    st.sidebar.markdown("---")
    st.sidebar.subheader("AVAX Price")

    default_price = DEFAULT_INITIAL_PRICE
    use_market = st.sidebar.checkbox(f"Start from latest {MARKET_TICKER} close", value=False)

    if use_market:
        try:
            market_price = cached_latest_close(MARKET_TICKER)
        except Exception as exc:
            logger.warning("Price lookup for %s failed: %s", MARKET_TICKER, exc)
            market_price = None

        if market_price is None:
            st.sidebar.warning(f"No {MARKET_TICKER} price available, using ${DEFAULT_INITIAL_PRICE}.")
        else:
            default_price = int(round(min(max(market_price, PRICE_MIN), PRICE_MAX)))

    initial_price = st.sidebar.number_input(
        "AVAX initial price ($)",
        min_value=PRICE_MIN,
        max_value=PRICE_MAX,
        value=default_price,
        step=PRICE_STEP,
        key=f"initial_price_{default_price}",
    )

st.sidebar.markdown("---")
st.sidebar.subheader("Growth Assumptions")

yield_growth = st.sidebar.slider(
    "yyAVAX : AVAX gains",
    GROWTH_MIN, GROWTH_MAX, variant.default_yield_growth,
    step=GROWTH_STEP,
    format="%.4f",
    key=f"yield_growth_{variant.points}",
)
st.sidebar.caption(f"yyAVAX: AVAX gains = {percent_label(yield_growth)}")

if variant.fee_growth:

    trading_fee_growth = st.sidebar.slider(
        "Trading fee growth",
        GROWTH_MIN, GROWTH_MAX, DEFAULT_TRADING_FEE_GROWTH,
        step=GROWTH_STEP,
        format="%.4f",
    )
    st.sidebar.caption(f"Trading fee growth = {percent_label(trading_fee_growth)}")

    farming_rewards_growth = st.sidebar.slider(
        "Farming rewards growth",
        GROWTH_MIN, GROWTH_MAX, DEFAULT_FARMING_REWARDS_GROWTH,
        step=GROWTH_STEP,
        format="%.4f",
    )
    st.sidebar.caption(f"Farming rewards growth = {percent_label(farming_rewards_growth)}")

# ============================================================
# Curve Generation
# ============================================================

params = PoolParameters(
    yield_growth=yield_growth,
    trading_fee_growth=trading_fee_growth,
    farming_rewards_growth=farming_rewards_growth,
    initial_price=initial_price,
)

try:
    curve = generate_curve(params, points=variant.points)
except ValueError as exc:
    st.error(f"Invalid parameters: {exc}")
    st.stop()

# ============================================================
# Dashboard Layout
# ============================================================

st.title("Impermanent Loss for yyAVAX deFi farming")

st.markdown("### How it works")

st.markdown(f"""
We show 3 charts in the graph below:

1. <span style="color:{AVAX_RED}">**AVAX/USDC vs. holding AVAX and USDC**</span> - the "normal"
impermanent loss for a given move in the price of AVAX when depositing into an AVAX/USDC pool.

2. <span style="color:{INFO_BLUE}">**yyAVAX/USDC vs. holding yyAVAX and USDC**</span> - also the "normal"
impermanent loss, with the effect of yyAVAX accruing value against AVAX separated out, for a yyAVAX/USDC pool.

3. <span style="color:{PRIMARY}">**yyAVAX/USDC vs. holding AVAX and USDC**</span> - not a normal impermanent
loss: the pooled yyAVAX/USDC assets are compared against plain AVAX and USDC. This is what you stand to lose
(or gain) by converting AVAX to yyAVAX and depositing into a yyAVAX/USDC pool instead of holding AVAX and USDC.
""", unsafe_allow_html=True)

st.markdown("""
Use the sidebar to adjust the expected gains from yyAVAX accruing value against AVAX.
""")

if variant.fee_growth:
    col1, col2, col3 = st.columns(3)
    col1.metric("AVAX initial price", f"${initial_price:,.2f}")
    col2.metric("Trading fee growth", percent_label(trading_fee_growth))
    col3.metric("Farming rewards growth", percent_label(farming_rewards_growth))

# ============================================================
# Loss Curves
# ============================================================

fig_curve = loss_curve_figure(curve, initial_price=initial_price)

st.plotly_chart(fig_curve, width="stretch")

st.download_button(
    "Download curve data (CSV)",
    curve.to_csv(index=False).encode("utf-8"),
    file_name="il_curve.csv",
    mime="text/csv",
)

# ============================================================
# The Maths
# ============================================================

st.markdown("---")
st.markdown("## The maths")

st.markdown("Let the change in AVAX price be")
st.latex(PRICE_RATIO)

st.markdown("and let the percentage growth in yyAVAX value in terms of AVAX be")
st.latex(YIELD_GROWTH)

for (label, formula), color in zip(SERIES_FORMULAS, (AVAX_RED, INFO_BLUE, PRIMARY)):
    st.markdown(f'<span style="color:{color}">**{label}**</span>', unsafe_allow_html=True)
    st.latex(formula)

st.caption("\\* Impermanent loss combined with gains from yyAVAX accruing value against AVAX.")

if variant.fee_growth:
    st.markdown("""
Then the overall net loss/gain once trading fee growth (t) and farming rewards growth (f)
have been taken into account is:
""")
    st.latex(NET_LOSS_GAIN)

with st.expander("Methodology: Sample Grid"):

    st.markdown(f"""
Every curve is evaluated at k = 0.00, 0.01, …, {0.01 * variant.points:.2f}
({variant.points + 1} points) and redrawn on every change of the inputs.

At k = 1 with g = 0 all three impermanent loss terms are zero. With fee and
reward growth netted in, the plotted value there is t + f (up to rounding).

IL₁ is symmetric under price inversion: IL₁(k) = IL₁(1/k).
""")
