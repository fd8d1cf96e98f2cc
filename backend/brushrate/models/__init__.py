"""Domain models for the brushrate pricing engine."""

from brushrate.models.enums import (
    ALLOWED_SURFACES,
    EXTERIOR_SURFACES,
    INTERIOR_SURFACES,
    PRIMARY_EXTERIOR_SURFACES,
    DifficultyLevel,
    PaintTier,
    ProjectType,
    SurfaceId,
)
from brushrate.models.estimate import PriceEstimate
from brushrate.models.project import (
    MAX_SQUARE_FOOTAGE,
    MIN_SQUARE_FOOTAGE,
    ContactInfo,
    EstimateRequest,
    ProjectInput,
)

__all__ = [
    "ALLOWED_SURFACES",
    "ContactInfo",
    "DifficultyLevel",
    "EXTERIOR_SURFACES",
    "EstimateRequest",
    "INTERIOR_SURFACES",
    "MAX_SQUARE_FOOTAGE",
    "MIN_SQUARE_FOOTAGE",
    "PRIMARY_EXTERIOR_SURFACES",
    "PaintTier",
    "PriceEstimate",
    "ProjectInput",
    "ProjectType",
    "SurfaceId",
]
