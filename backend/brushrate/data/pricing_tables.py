"""Schema for the pricing tables consumed by the pricing engine."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    model_validator,
)

from brushrate.models.enums import DifficultyLevel, PaintTier, SurfaceId


def _read_only(table: Mapping[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(dict(table))


def _as_dict(table: Mapping[Any, Any]) -> dict[Any, Any]:
    return dict(table)


# Frozen models only block attribute assignment; lookup tables are wrapped
# read-only so their entries cannot be changed in place either.
SurfaceTable = Annotated[
    Mapping[SurfaceId, float], AfterValidator(_read_only), PlainSerializer(_as_dict)
]
PaintTierTable = Annotated[
    Mapping[PaintTier, float], AfterValidator(_read_only), PlainSerializer(_as_dict)
]
DifficultyTable = Annotated[
    Mapping[DifficultyLevel, float],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict),
]
TierLabelTable = Annotated[
    Mapping[PaintTier, str], AfterValidator(_read_only), PlainSerializer(_as_dict)
]


class RateTable(BaseModel):
    """Unmodified per-square-foot cost band before any multiplier."""

    model_config = ConfigDict(frozen=True)

    base_rate_per_sqft_min: float = Field(ge=0)
    base_rate_per_sqft_max: float = Field(ge=0)

    @model_validator(mode="after")
    def min_le_max(self) -> RateTable:
        if self.base_rate_per_sqft_min > self.base_rate_per_sqft_max:
            msg = (
                f"base_rate_per_sqft_min ({self.base_rate_per_sqft_min}) must not "
                f"exceed base_rate_per_sqft_max ({self.base_rate_per_sqft_max})"
            )
            raise ValueError(msg)
        return self


class SurfaceWeights(BaseModel):
    """Surface multiplier weights.

    Interior weights are additive: a room with walls and ceilings costs
    more per square foot than walls alone. Exterior weights are scalars of
    which only the hardest selected surface counts; exterior trim is added
    on top.
    """

    model_config = ConfigDict(frozen=True)

    interior: SurfaceTable
    interior_minimum_base: float
    exterior: SurfaceTable
    exterior_trim: float
    # Combined projects: add exterior trim even without a primary exterior
    # surface. Pending confirmation from the pricing owner.
    combined_trim_on_exterior: bool = True


class MultiplierTable(BaseModel):
    """The three independent multiplier tables."""

    model_config = ConfigDict(frozen=True)

    paint_tier: PaintTierTable
    difficulty: DifficultyTable
    surface: SurfaceWeights


class MinimumPricingPolicy(BaseModel):
    """Floors enforced after the raw computation."""

    model_config = ConfigDict(frozen=True)

    absolute_minimum: float = Field(ge=0)
    minimum_spread: float = Field(ge=0)


class PricingConfig(BaseModel):
    """Everything the pricing engine needs, as one immutable value."""

    model_config = ConfigDict(frozen=True)

    rates: RateTable
    multipliers: MultiplierTable
    minimums: MinimumPricingPolicy
    tier_labels: TierLabelTable
    version: str
