"""Factory functions for creating pre-configured PricingEngine instances."""

from __future__ import annotations

from brushrate.data.seed import DEFAULT_PRICING_CONFIG
from brushrate.engine import PricingEngine


def create_default_engine() -> PricingEngine:
    """Create a PricingEngine wired up with the default seed pricing tables.

    This is the recommended way to create a PricingEngine for typical usage.
    Callers that need alternate tables should build a PricingConfig and pass
    it to PricingEngine directly.

    Returns:
        A PricingEngine ready to produce estimates.

    Example::

        from brushrate import create_default_engine, ProjectInput

        engine = create_default_engine()
        estimate = engine.estimate(project)
    """
    return PricingEngine(DEFAULT_PRICING_CONFIG)
