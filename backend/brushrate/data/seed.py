"""Seed pricing data for the brushrate pricing engine.

Rates are residential repaint averages for the Northern Colorado market,
labor and materials combined.
"""

from brushrate.data.pricing_tables import (
    MinimumPricingPolicy,
    MultiplierTable,
    PricingConfig,
    RateTable,
    SurfaceWeights,
)
from brushrate.models.enums import DifficultyLevel, PaintTier, SurfaceId

PRICING_DATA_VERSION = "2025.1"

BASE_RATES = RateTable(
    base_rate_per_sqft_min=1.5,
    base_rate_per_sqft_max=3.5,
)

PAINT_TIER_MULTIPLIERS: dict[PaintTier, float] = {
    PaintTier.STANDARD: 1.0,
    PaintTier.PREMIUM: 1.3,
    PaintTier.DESIGNER: 1.6,
}

DIFFICULTY_MULTIPLIERS: dict[DifficultyLevel, float] = {
    DifficultyLevel.BASIC: 1.0,  # new construction, minimal prep
    DifficultyLevel.STANDARD: 1.2,  # good condition, light prep
    DifficultyLevel.MODERATE: 1.5,  # some repairs, medium prep
    DifficultyLevel.COMPLEX: 2.0,  # extensive prep, intricate details
    DifficultyLevel.HIGH_DIFFICULTY: 2.5,  # historical restoration
}

SURFACE_WEIGHTS = SurfaceWeights(
    interior={
        SurfaceId.WALLS: 1.0,
        SurfaceId.CEILINGS: 0.4,
        SurfaceId.TRIM: 0.3,
    },
    interior_minimum_base=0.8,
    exterior={
        SurfaceId.WOOD_SIDING: 1.0,
        SurfaceId.VINYL_SIDING: 1.1,  # specific primer, slight prep
        SurfaceId.CEMENT: 1.3,  # masonry primer
        SurfaceId.STUCCO: 1.5,  # textured, poor coverage
        SurfaceId.BRICK: 1.6,  # high absorption
    },
    exterior_trim=0.2,
)

MINIMUM_PRICING = MinimumPricingPolicy(
    absolute_minimum=3000,
    minimum_spread=3000,
)

TIER_LABELS: dict[PaintTier, str] = {
    PaintTier.STANDARD: "Standard Paint",
    PaintTier.PREMIUM: "Premium Paint",
    PaintTier.DESIGNER: "Designer/Specialty Paint",
}

DIFFICULTY_DESCRIPTIONS: dict[DifficultyLevel, str] = {
    DifficultyLevel.BASIC: "Basic - New construction, minimal prep",
    DifficultyLevel.STANDARD: "Standard - Good condition, light prep",
    DifficultyLevel.MODERATE: "Moderate - Some repairs, medium prep",
    DifficultyLevel.COMPLEX: "Complex - Extensive prep, repairs, intricate details",
    DifficultyLevel.HIGH_DIFFICULTY: (
        "High Difficulty - Historical restoration, specialty techniques"
    ),
}

DEFAULT_PRICING_CONFIG = PricingConfig(
    rates=BASE_RATES,
    multipliers=MultiplierTable(
        paint_tier=PAINT_TIER_MULTIPLIERS,
        difficulty=DIFFICULTY_MULTIPLIERS,
        surface=SURFACE_WEIGHTS,
    ),
    minimums=MINIMUM_PRICING,
    tier_labels=TIER_LABELS,
    version=PRICING_DATA_VERSION,
)
