import pandas as pd
import plotly.graph_objects as go

from il_explorer.config import (
    PRICE_COLUMN,
    REFERENCE_GREY,
    SERIES,
    SERIES_COLORS,
    Y_RANGE,
    Y_TICKS,
)


def percent_label(value: float) -> str:
    return f"{100 * value:.2f}%"


def loss_curve_figure(curve: pd.DataFrame, initial_price=None) -> go.Figure:
    """
    Line chart of the three loss/gain series.

    With an initial price the x axis is the new AVAX price over
    [0, 4 * initial_price], otherwise it is the raw price ratio k.
    """
    price_axis = initial_price is not None and PRICE_COLUMN in curve.columns
    x = curve[PRICE_COLUMN] if price_axis else curve["k"]

    if price_axis:
        hover_title = (
            "New price = $%{x:.2f} per AVAX, "
            f"(Old price = ${initial_price:.2f})"
        )
    else:
        hover_title = "k = %{x:.2f}"

    fig = go.Figure()

    for name in SERIES:
        fig.add_trace(go.Scatter(
            x=x,
            y=curve[name],
            name=name,
            mode="lines",
            line=dict(color=SERIES_COLORS[name]),
            hovertemplate=f"{hover_title}<br>%{{y:.2%}}<extra>{name}</extra>",
        ))

    fig.add_hline(y=0, line_dash="dash", line_color=REFERENCE_GREY)

    if price_axis:
        fig.update_xaxes(
            title_text="New AVAX price",
            range=[0, 4 * initial_price],
            nticks=5,
            tickprefix="$",
            tickformat=".0f",
        )
        y_title = "Net loss/gain from IL & other growth"
    else:
        fig.update_xaxes(title_text="k = new price / old price")
        y_title = "Loss/gain from IL"

    fig.update_yaxes(
        title_text=y_title,
        range=list(Y_RANGE),
        tickvals=list(Y_TICKS),
        tickformat=".0%",
    )

    fig.update_layout(
        template="plotly_dark",
        height=600,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
        margin=dict(t=60, r=40, l=10, b=12),
    )

    return fig
