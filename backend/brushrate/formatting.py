"""Formatting helpers for estimate output.

Estimates are shown the way a painting contractor quotes a ballpark:
whole dollars with comma grouping (e.g. '$3,000 - $6,000').
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brushrate.models.estimate import PriceEstimate


def format_currency(amount: float) -> str:
    """Format an amount as whole dollars, e.g. '$12,345'."""
    return f"${amount:,.0f}"


def format_price_range(estimate: PriceEstimate) -> str:
    """Format a PriceEstimate as '$X,XXX - $X,XXX'."""
    return f"{format_currency(estimate.min_price)} - {format_currency(estimate.max_price)}"


def format_multiplier(value: float) -> str:
    """Format a multiplier the way the form labels them, e.g. '1.3x'."""
    return f"{value:.1f}x"
