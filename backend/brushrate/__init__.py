"""brushrate painting cost estimator.

Usage::

    from brushrate import create_default_engine, ProjectInput

    engine = create_default_engine()
    estimate = engine.estimate(project)
"""

from brushrate.data.pricing_tables import (
    MinimumPricingPolicy,
    MultiplierTable,
    PricingConfig,
    RateTable,
    SurfaceWeights,
)
from brushrate.data.seed import DEFAULT_PRICING_CONFIG
from brushrate.engine import PricingEngine
from brushrate.factory import create_default_engine
from brushrate.models.enums import DifficultyLevel, PaintTier, ProjectType, SurfaceId
from brushrate.models.estimate import PriceEstimate
from brushrate.models.project import ContactInfo, EstimateRequest, ProjectInput

__all__ = [
    "DEFAULT_PRICING_CONFIG",
    "ContactInfo",
    "DifficultyLevel",
    "EstimateRequest",
    "MinimumPricingPolicy",
    "MultiplierTable",
    "PaintTier",
    "PriceEstimate",
    "PricingConfig",
    "PricingEngine",
    "ProjectInput",
    "ProjectType",
    "RateTable",
    "SurfaceId",
    "SurfaceWeights",
    "create_default_engine",
]
