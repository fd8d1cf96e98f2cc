"""Invariants that hold across the whole input domain of the pricing engine.

Each property is checked over a grid of tiers, difficulties, project types,
surface selections and square footages.
"""

from __future__ import annotations

import itertools

import pytest

from brushrate.data.seed import MINIMUM_PRICING
from brushrate.factory import create_default_engine
from brushrate.models.enums import (
    ALLOWED_SURFACES,
    DifficultyLevel,
    PaintTier,
    ProjectType,
    SurfaceId,
)
from brushrate.models.project import ProjectInput

_ENGINE = create_default_engine()

_SQUARE_FOOTAGES = [100, 250, 999, 1000, 1500, 2400, 5000, 12_500]

_SURFACE_SELECTIONS: dict[ProjectType, list[frozenset[SurfaceId]]] = {
    ProjectType.INTERIOR: [
        frozenset(),
        frozenset({SurfaceId.WALLS}),
        frozenset({SurfaceId.CEILINGS, SurfaceId.TRIM}),
        frozenset({SurfaceId.WALLS, SurfaceId.CEILINGS, SurfaceId.TRIM}),
    ],
    ProjectType.EXTERIOR: [
        frozenset(),
        frozenset({SurfaceId.TRIM}),
        frozenset({SurfaceId.VINYL_SIDING}),
        frozenset({SurfaceId.BRICK, SurfaceId.STUCCO, SurfaceId.TRIM}),
    ],
    ProjectType.BOTH: [
        frozenset(),
        frozenset({SurfaceId.TRIM}),
        frozenset({SurfaceId.CEILINGS, SurfaceId.CEMENT}),
        frozenset({SurfaceId.WALLS, SurfaceId.TRIM, SurfaceId.WOOD_SIDING}),
    ],
}


def _combinations() -> list[tuple[ProjectType, frozenset[SurfaceId], DifficultyLevel]]:
    return [
        (project_type, surfaces, difficulty)
        for project_type, selections in _SURFACE_SELECTIONS.items()
        for surfaces in selections
        for difficulty in DifficultyLevel
    ]


def _project(
    project_type: ProjectType,
    surfaces: frozenset[SurfaceId],
    difficulty: DifficultyLevel,
    tier: PaintTier = PaintTier.STANDARD,
    square_footage: int = 1000,
) -> ProjectInput:
    return ProjectInput(
        project_type=project_type,
        square_footage=square_footage,
        paint_tier=tier,
        difficulty_level=difficulty,
        surfaces=surfaces,
    )


def test_surface_selections_are_valid_for_their_type() -> None:
    for project_type, selections in _SURFACE_SELECTIONS.items():
        for surfaces in selections:
            assert surfaces <= ALLOWED_SURFACES[project_type]


@pytest.mark.parametrize(("project_type", "surfaces", "difficulty"), _combinations())
class TestInvariants:
    def test_monotonic_in_square_footage(
        self,
        project_type: ProjectType,
        surfaces: frozenset[SurfaceId],
        difficulty: DifficultyLevel,
    ) -> None:
        for tier in PaintTier:
            estimates = [
                _ENGINE.estimate(
                    _project(project_type, surfaces, difficulty, tier, sqft)
                )
                for sqft in _SQUARE_FOOTAGES
            ]
            for smaller, larger in itertools.pairwise(estimates):
                assert smaller.min_price <= larger.min_price
                assert smaller.max_price <= larger.max_price

    def test_tier_ordering(
        self,
        project_type: ProjectType,
        surfaces: frozenset[SurfaceId],
        difficulty: DifficultyLevel,
    ) -> None:
        for sqft in _SQUARE_FOOTAGES:
            standard, premium, designer = (
                _ENGINE.estimate(
                    _project(project_type, surfaces, difficulty, tier, sqft)
                )
                for tier in (PaintTier.STANDARD, PaintTier.PREMIUM, PaintTier.DESIGNER)
            )
            assert standard.min_price <= premium.min_price <= designer.min_price
            if standard.min_price > MINIMUM_PRICING.absolute_minimum:
                assert standard.min_price < premium.min_price < designer.min_price

    def test_spread_and_floor(
        self,
        project_type: ProjectType,
        surfaces: frozenset[SurfaceId],
        difficulty: DifficultyLevel,
    ) -> None:
        for tier, sqft in itertools.product(PaintTier, _SQUARE_FOOTAGES):
            est = _ENGINE.estimate(
                _project(project_type, surfaces, difficulty, tier, sqft)
            )
            assert est.min_price >= 3000
            assert est.max_price - est.min_price >= 3000

    def test_idempotent(
        self,
        project_type: ProjectType,
        surfaces: frozenset[SurfaceId],
        difficulty: DifficultyLevel,
    ) -> None:
        project = _project(project_type, surfaces, difficulty, square_footage=3300)
        assert _ENGINE.estimate(project) == _ENGINE.estimate(project)


@pytest.mark.parametrize("project_type", list(ProjectType))
def test_empty_surfaces_take_the_neutral_path(project_type: ProjectType) -> None:
    """No surfaces selected prices exactly like a 1.0 surface multiplier."""
    project = _project(
        project_type,
        frozenset(),
        DifficultyLevel.COMPLEX,
        PaintTier.PREMIUM,
        square_footage=2200,
    )
    est = _ENGINE.estimate(project)
    # [1.5, 3.5] x 1.3 x 2.0 x 1.0 x 2200
    assert est.surface_multiplier == 1.0
    assert est.min_price == 8580
    assert est.max_price == 20020
