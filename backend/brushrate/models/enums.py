"""Enums for the brushrate domain models.

These enums are the closed vocabularies a painting estimate request is
built from. Values match the identifiers used by the intake form.
"""

from enum import StrEnum


class ProjectType(StrEnum):
    """Where the painting work happens."""

    INTERIOR = "interior"
    EXTERIOR = "exterior"
    BOTH = "both"


class PaintTier(StrEnum):
    """Paint product quality tiers."""

    STANDARD = "standard"
    PREMIUM = "premium"
    DESIGNER = "designer"


class DifficultyLevel(StrEnum):
    """Overall job difficulty, driven mostly by surface prep and detail work."""

    BASIC = "basic"
    STANDARD = "standard"
    MODERATE = "moderate"
    COMPLEX = "complex"
    HIGH_DIFFICULTY = "high_difficulty"


class SurfaceId(StrEnum):
    """Paintable surfaces.

    ``TRIM`` is shared between interior and exterior work.
    """

    # Interior
    WALLS = "walls"
    CEILINGS = "ceilings"

    # Shared
    TRIM = "trim"

    # Exterior
    WOOD_SIDING = "wood_siding"
    VINYL_SIDING = "vinyl_siding"
    CEMENT = "cement"
    STUCCO = "stucco"
    BRICK = "brick"


INTERIOR_SURFACES: frozenset[SurfaceId] = frozenset(
    {SurfaceId.WALLS, SurfaceId.CEILINGS, SurfaceId.TRIM}
)

PRIMARY_EXTERIOR_SURFACES: frozenset[SurfaceId] = frozenset(
    {
        SurfaceId.WOOD_SIDING,
        SurfaceId.VINYL_SIDING,
        SurfaceId.CEMENT,
        SurfaceId.STUCCO,
        SurfaceId.BRICK,
    }
)

EXTERIOR_SURFACES: frozenset[SurfaceId] = PRIMARY_EXTERIOR_SURFACES | {SurfaceId.TRIM}

ALLOWED_SURFACES: dict[ProjectType, frozenset[SurfaceId]] = {
    ProjectType.INTERIOR: INTERIOR_SURFACES,
    ProjectType.EXTERIOR: EXTERIOR_SURFACES,
    ProjectType.BOTH: INTERIOR_SURFACES | EXTERIOR_SURFACES,
}
