import logging

import pandas as pd
import pytest
import streamlit as st
import yfinance as yf
from streamlit.testing.v1 import AppTest

from il_explorer import model
from il_explorer.config import RATIO_VARIANT

NO_PRICE_WARNING = "No AVAX-USD price available, using $30."


@pytest.fixture
def app_test(repo_root) -> AppTest:
    st.cache_data.clear()
    return AppTest.from_file(str(repo_root / "app.py"), default_timeout=60)


@pytest.fixture
def app(app_test) -> AppTest:
    return app_test.run()


def _closes(values):
    index = pd.date_range("2024-01-01", periods=len(values), freq="D")
    return pd.DataFrame({"Close": values}, index=index)


def test_price_variant_renders(app):
    assert not app.exception
    assert not app.error

    assert len(app.sidebar.slider) == 3
    assert app.sidebar.slider[0].value == pytest.approx(0.09)
    assert app.sidebar.number_input[0].value == 30

    captions = [c.value for c in app.sidebar.caption]
    assert "yyAVAX: AVAX gains = 9.00%" in captions
    assert "Trading fee growth = 15.00%" in captions
    assert "Farming rewards growth = 8.00%" in captions

    assert len(app.get("plotly_chart")) == 1
    assert len(app.latex) == 6

    text = "\n".join(m.value for m in app.markdown)
    assert "t + f (up to rounding)" in text


def test_slider_change_updates_caption(app):
    app.sidebar.slider[0].set_value(0.2).run()

    assert not app.exception
    captions = [c.value for c in app.sidebar.caption]
    assert "yyAVAX: AVAX gains = 20.00%" in captions


def test_ratio_variant_hides_fee_sliders(app):
    app.sidebar.radio[0].set_value(RATIO_VARIANT.name).run()

    assert not app.exception
    assert len(app.sidebar.slider) == 1
    assert app.sidebar.slider[0].value == pytest.approx(0.05)
    assert len(app.sidebar.number_input) == 0
    assert len(app.latex) == 5


def test_market_lookup_failure_keeps_default_price(app, monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise ConnectionError("offline")

    monkeypatch.setattr(yf, "download", broken)

    with caplog.at_level(logging.WARNING, logger="il_explorer.app"):
        app.sidebar.checkbox[0].check().run()

    assert not app.exception
    assert [w.value for w in app.sidebar.warning] == [NO_PRICE_WARNING]
    assert app.sidebar.number_input[0].value == 30
    assert any(
        r.name == "il_explorer.app" and "offline" in r.getMessage() for r in caplog.records
    )


def test_market_lookup_empty_keeps_default_price(app, monkeypatch):
    monkeypatch.setattr(yf, "download", lambda *a, **kw: pd.DataFrame())

    app.sidebar.checkbox[0].check().run()

    assert not app.exception
    assert [w.value for w in app.sidebar.warning] == [NO_PRICE_WARNING]
    assert app.sidebar.number_input[0].value == 30


def test_market_price_is_clamped_into_input_range(app, monkeypatch):
    monkeypatch.setattr(yf, "download", lambda *a, **kw: _closes([240.0, 250.0]))

    app.sidebar.checkbox[0].check().run()

    assert not app.exception
    assert len(app.sidebar.warning) == 0
    assert app.sidebar.number_input[0].value == 100


def test_market_price_seeds_input(app, monkeypatch):
    monkeypatch.setattr(yf, "download", lambda *a, **kw: _closes([21.6]))

    app.sidebar.checkbox[0].check().run()

    assert not app.exception
    assert app.sidebar.number_input[0].value == 22


def test_invalid_parameters_stop_the_page(app_test, monkeypatch):
    def rejecting(params, points=400):
        raise ValueError("yield_growth must be >= -1")

    monkeypatch.setattr(model, "generate_curve", rejecting)
    app_test.run()

    assert not app_test.exception
    assert [e.value for e in app_test.error] == [
        "Invalid parameters: yield_growth must be >= -1"
    ]
    assert len(app_test.get("plotly_chart")) == 0
    assert len(app_test.latex) == 0
