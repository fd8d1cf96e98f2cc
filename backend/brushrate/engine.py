"""Core pricing engine for the brushrate painting estimator.

The PricingEngine turns a ProjectInput into a planning-stage price range:

1. **Base band**: start from the per-square-foot min/max base rates.
2. **Paint tier**: scale the band by the paint tier multiplier.
3. **Difficulty**: scale the band by the job difficulty multiplier.
4. **Surface multiplier**: compose it from the selected surfaces; the rule
   depends on the project type (additive for interior, hardest-surface for
   exterior, averaged for combined projects).
5. **Surfaces**: scale the band by that multiplier.
6. **Area**: multiply the band by the square footage.
7. **Spread floor**: widen the range to the minimum spread.
8. **Absolute floor**: lift the lower bound to the absolute minimum.
9. **Rounding**: round to whole currency units and attach the tier label.

The engine is pure: it holds only an immutable PricingConfig, performs no
I/O and never raises for a validated ProjectInput, whose square footage is
bounded so every intermediate value stays a finite float. Unrecognised tier or
difficulty keys price as a neutral 1.0 multiplier.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Collection
from typing import TYPE_CHECKING

from brushrate.models.enums import ProjectType, SurfaceId
from brushrate.models.estimate import PriceEstimate

if TYPE_CHECKING:
    from brushrate.data.pricing_tables import PricingConfig, SurfaceWeights
    from brushrate.models.project import ProjectInput

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"

_NEUTRAL = 1.0


def interior_surface_multiplier(
    surfaces: Collection[str], weights: SurfaceWeights
) -> float:
    """Additive interior composition.

    Walls carry the full base weight; ceilings and trim add to it. Work
    without walls gets the minimum-base weight so it never prices at zero.
    """
    if not surfaces:
        return _NEUTRAL

    total = 0.0
    for surface, weight in weights.interior.items():
        if surface in surfaces:
            total += weight

    if total == 0:
        # Nothing recognised as interior work.
        return _NEUTRAL

    if SurfaceId.WALLS not in surfaces:
        total += weights.interior_minimum_base
    return total


def exterior_surface_multiplier(
    surfaces: Collection[str], weights: SurfaceWeights
) -> float:
    """Hardest selected exterior surface, plus trim.

    Exterior surface difficulty does not stack: coverage cost is dominated
    by the hardest surface on the house.
    """
    primary = [weights.exterior[s] for s in surfaces if s in weights.exterior]
    has_trim = SurfaceId.TRIM in surfaces

    if primary:
        multiplier = max(primary)
        if has_trim:
            multiplier += weights.exterior_trim
        return multiplier
    if has_trim:
        return _NEUTRAL + weights.exterior_trim
    return _NEUTRAL


def combined_surface_multiplier(
    surfaces: Collection[str], weights: SurfaceWeights
) -> float:
    """Blend interior and exterior work for a combined project.

    A combined project's per-square-foot cost is the mean of the interior
    and exterior accumulators rather than their sum. Trim joins the interior
    side only alongside walls or ceilings.
    """
    if not surfaces:
        return _NEUTRAL

    has_trim = SurfaceId.TRIM in surfaces

    interior_selected = [
        s for s in (SurfaceId.WALLS, SurfaceId.CEILINGS) if s in surfaces
    ]
    interior_acc = sum(weights.interior.get(s, 0.0) for s in interior_selected)
    if has_trim and interior_selected:
        interior_acc += weights.interior.get(SurfaceId.TRIM, 0.0)

    primary = [weights.exterior[s] for s in surfaces if s in weights.exterior]
    exterior_acc = max(primary, default=_NEUTRAL)
    if has_trim and (primary or weights.combined_trim_on_exterior):
        exterior_acc += weights.exterior_trim

    return (max(interior_acc, _NEUTRAL) + exterior_acc) / 2


_SURFACE_RULES: dict[ProjectType, Callable[[Collection[str], SurfaceWeights], float]] = {
    ProjectType.INTERIOR: interior_surface_multiplier,
    ProjectType.EXTERIOR: exterior_surface_multiplier,
    ProjectType.BOTH: combined_surface_multiplier,
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class PricingEngine:
    """Converts a ProjectInput into a PriceEstimate.

    Args:
        config: The pricing tables. Tests can substitute alternate tables
            without touching engine logic.

    Example::

        from brushrate.data.seed import DEFAULT_PRICING_CONFIG

        engine = PricingEngine(DEFAULT_PRICING_CONFIG)
        estimate = engine.estimate(project)
    """

    def __init__(self, config: PricingConfig) -> None:
        self._config = config

    @property
    def config(self) -> PricingConfig:
        return self._config

    def surface_multiplier(self, project: ProjectInput) -> float:
        """Return the surface multiplier for the project's type and surfaces."""
        rule = _SURFACE_RULES.get(project.project_type)
        if rule is None:
            return _NEUTRAL
        return rule(project.surfaces, self._config.multipliers.surface)

    def estimate(self, project: ProjectInput) -> PriceEstimate:
        """Produce a planning-stage price range for a painting project.

        Args:
            project: A complete, validated project description.

        Returns:
            A PriceEstimate whose spread and lower bound respect the
            minimum pricing policy.
        """
        config = self._config
        multipliers = config.multipliers

        # 1. Base band
        rate_min = config.rates.base_rate_per_sqft_min
        rate_max = config.rates.base_rate_per_sqft_max

        # 2. Paint tier
        tier_multiplier = multipliers.paint_tier.get(project.paint_tier, _NEUTRAL)
        rate_min *= tier_multiplier
        rate_max *= tier_multiplier

        # 3. Difficulty
        difficulty_multiplier = multipliers.difficulty.get(
            project.difficulty_level, _NEUTRAL
        )
        rate_min *= difficulty_multiplier
        rate_max *= difficulty_multiplier

        # 4-5. Surfaces
        surface_multiplier = self.surface_multiplier(project)
        rate_min *= surface_multiplier
        rate_max *= surface_multiplier

        # 6. Area
        min_price = rate_min * project.square_footage
        max_price = rate_max * project.square_footage

        # 7. Spread floor
        minimums = config.minimums
        if max_price - min_price < minimums.minimum_spread:
            max_price = min_price + minimums.minimum_spread

        # 8. Absolute floor
        if min_price < minimums.absolute_minimum:
            min_price = minimums.absolute_minimum
            max_price = max(
                max_price, minimums.absolute_minimum + minimums.minimum_spread
            )

        logger.debug(
            "Priced %s sqft %s/%s/%s: tier=%.2f difficulty=%.2f surfaces=%.3f "
            "-> %.2f-%.2f",
            project.square_footage,
            project.project_type,
            project.paint_tier,
            project.difficulty_level,
            tier_multiplier,
            difficulty_multiplier,
            surface_multiplier,
            min_price,
            max_price,
        )

        # 9. Round and label
        return PriceEstimate(
            min_price=_round_half_up(min_price),
            max_price=_round_half_up(max_price),
            tier_label=config.tier_labels.get(
                project.paint_tier, str(project.paint_tier)
            ),
            surface_multiplier=surface_multiplier,
        )
