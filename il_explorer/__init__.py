"""Impermanent loss curves for yyAVAX/USDC liquidity provision."""

from il_explorer.model import (
    PoolParameters,
    generate_curve,
    impermanent_loss,
    net_loss_gain,
    sample_grid,
    yield_impermanent_loss,
    yield_vs_hold_loss,
)

__all__ = [
    "PoolParameters",
    "generate_curve",
    "impermanent_loss",
    "net_loss_gain",
    "sample_grid",
    "yield_impermanent_loss",
    "yield_vs_hold_loss",
]
