import logging
from typing import Optional

import pandas as pd
import yfinance as yf

from il_explorer.config import MARKET_TICKER

logger = logging.getLogger(__name__)


def latest_close(ticker: str = MARKET_TICKER, period: str = "5d") -> Optional[float]:
    """Last daily close for ticker, or None when Yahoo returns nothing."""
    logger.info("Downloading %s closes (%s)", ticker, period)

    data = yf.download(ticker, period=period, auto_adjust=True, progress=False)

    if data is None or data.empty:
        logger.warning("No price data returned for %s", ticker)
        return None

    if isinstance(data.columns, pd.MultiIndex):
        closes = data["Close"][ticker]
    else:
        closes = data["Close"]

    closes = closes.dropna()

    if closes.empty:
        logger.warning("No close prices for %s", ticker)
        return None

    return float(closes.iloc[-1])
