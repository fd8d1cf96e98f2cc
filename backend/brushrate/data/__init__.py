"""Pricing data layer for the brushrate pricing engine."""

from brushrate.data.catalog import SurfaceOption, surface_options
from brushrate.data.pricing_tables import (
    MinimumPricingPolicy,
    MultiplierTable,
    PricingConfig,
    RateTable,
    SurfaceWeights,
)
from brushrate.data.seed import DEFAULT_PRICING_CONFIG

__all__ = [
    "DEFAULT_PRICING_CONFIG",
    "MinimumPricingPolicy",
    "MultiplierTable",
    "PricingConfig",
    "RateTable",
    "SurfaceOption",
    "SurfaceWeights",
    "surface_options",
]
