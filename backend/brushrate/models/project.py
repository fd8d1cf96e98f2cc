"""Project input models for the brushrate pricing engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from brushrate.models.enums import (
    ALLOWED_SURFACES,
    DifficultyLevel,
    PaintTier,
    ProjectType,
    SurfaceId,
)

MIN_SQUARE_FOOTAGE = 100
MAX_SQUARE_FOOTAGE = 1_000_000


class ProjectInput(BaseModel):
    """Structured input to the pricing engine.

    Instances are immutable. Construction through pydantic validation
    guarantees the engine precondition: square footage lies within
    ``MIN_SQUARE_FOOTAGE``..``MAX_SQUARE_FOOTAGE`` and every surface belongs
    to the project type.
    """

    model_config = ConfigDict(frozen=True)

    project_type: ProjectType
    square_footage: int = Field(ge=MIN_SQUARE_FOOTAGE, le=MAX_SQUARE_FOOTAGE)
    paint_tier: PaintTier
    difficulty_level: DifficultyLevel = DifficultyLevel.BASIC
    surfaces: frozenset[SurfaceId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def surfaces_match_project_type(self) -> ProjectInput:
        allowed = ALLOWED_SURFACES[self.project_type]
        invalid = sorted(s.value for s in self.surfaces - allowed)
        if invalid:
            msg = (
                f"Surfaces {invalid} are not valid for a "
                f"{self.project_type.value} project"
            )
            raise ValueError(msg)
        return self


class ContactInfo(BaseModel):
    """Client contact details collected alongside a project."""

    model_config = ConfigDict(frozen=True)

    client_name: str
    email: str
    phone: str = ""
    address: str


class EstimateRequest(BaseModel):
    """Raw intake form data, before completeness checks.

    Every field is optional here; ``brushrate.services.validation`` decides
    what is missing or malformed. Accepts both snake_case and the camelCase
    keys a browser form sends.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    project_type: str = ""
    square_footage: int | str | None = None
    paint_tier: str = ""
    surfaces: list[str] = Field(default_factory=list)
    difficulty_level: str = ""
    additional_notes: str = ""
