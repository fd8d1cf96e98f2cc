"""Selectable options offered to the intake form.

Surface lists are ordered the way the form presents them. A combined
("both") project offers the interior list followed by the exterior list,
with the shared trim surface listed once.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from brushrate.data.seed import (
    DIFFICULTY_DESCRIPTIONS,
    DIFFICULTY_MULTIPLIERS,
    PAINT_TIER_MULTIPLIERS,
)
from brushrate.models.enums import DifficultyLevel, PaintTier, ProjectType, SurfaceId


class SurfaceOption(BaseModel):
    """A surface the client can tick for a given project type."""

    model_config = ConfigDict(frozen=True)

    surface_id: SurfaceId
    label: str


class TierOption(BaseModel):
    """A paint tier card shown to the client."""

    model_config = ConfigDict(frozen=True)

    tier: PaintTier
    title: str
    multiplier: float
    features: tuple[str, ...]


class DifficultyOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: DifficultyLevel
    multiplier: float
    description: str


_INTERIOR_OPTIONS: tuple[SurfaceOption, ...] = (
    SurfaceOption(surface_id=SurfaceId.WALLS, label="Walls"),
    SurfaceOption(surface_id=SurfaceId.CEILINGS, label="Ceilings"),
    SurfaceOption(surface_id=SurfaceId.TRIM, label="Trim"),
)

_EXTERIOR_OPTIONS: tuple[SurfaceOption, ...] = (
    SurfaceOption(surface_id=SurfaceId.WOOD_SIDING, label="Wood Siding"),
    SurfaceOption(surface_id=SurfaceId.TRIM, label="Trim"),
    SurfaceOption(surface_id=SurfaceId.STUCCO, label="Stucco"),
    SurfaceOption(surface_id=SurfaceId.CEMENT, label="Cement"),
    SurfaceOption(surface_id=SurfaceId.VINYL_SIDING, label="Vinyl Siding"),
    SurfaceOption(surface_id=SurfaceId.BRICK, label="Brick"),
)

_TIER_FEATURES: dict[PaintTier, tuple[str, tuple[str, ...]]] = {
    PaintTier.STANDARD: (
        "Standard",
        ("Good durability", "Easy application", "Wide color selection"),
    ),
    PaintTier.PREMIUM: (
        "Premium",
        ("Excellent durability", "Superior coverage", "Advanced colors"),
    ),
    PaintTier.DESIGNER: (
        "Designer",
        ("Specialty finishes", "Custom colors", "Premium formulas"),
    ),
}


def surface_options(project_type: ProjectType) -> list[SurfaceOption]:
    """Return the surfaces offered for a project type, in display order."""
    if project_type == ProjectType.INTERIOR:
        return list(_INTERIOR_OPTIONS)
    if project_type == ProjectType.EXTERIOR:
        return list(_EXTERIOR_OPTIONS)

    options = list(_INTERIOR_OPTIONS)
    seen = {o.surface_id for o in options}
    options.extend(o for o in _EXTERIOR_OPTIONS if o.surface_id not in seen)
    return options


def tier_options() -> list[TierOption]:
    return [
        TierOption(
            tier=tier,
            title=title,
            multiplier=PAINT_TIER_MULTIPLIERS[tier],
            features=features,
        )
        for tier, (title, features) in _TIER_FEATURES.items()
    ]


def difficulty_options() -> list[DifficultyOption]:
    """Difficulty levels from easiest to hardest, with their multipliers."""
    return [
        DifficultyOption(
            level=level,
            multiplier=DIFFICULTY_MULTIPLIERS[level],
            description=DIFFICULTY_DESCRIPTIONS[level],
        )
        for level in DifficultyLevel
    ]
