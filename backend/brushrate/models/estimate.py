"""Estimate output models for the brushrate pricing engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PriceEstimate(BaseModel):
    """A planning-stage price range for a painting project.

    We NEVER output a single number, and the range is never an official
    quote. Bounds are whole currency units.
    """

    model_config = ConfigDict(frozen=True)

    min_price: int = Field(ge=0)
    max_price: int = Field(ge=0)
    tier_label: str
    surface_multiplier: float = 1.0

    @model_validator(mode="after")
    def min_le_max(self) -> PriceEstimate:
        if self.min_price > self.max_price:
            msg = (
                f"Must satisfy min_price <= max_price, "
                f"got {self.min_price} > {self.max_price}"
            )
            raise ValueError(msg)
        return self

    @property
    def spread(self) -> int:
        return self.max_price - self.min_price

    def __format__(self, format_spec: str) -> str:
        """Delegate formatting to the lower bound when a spec is given."""
        if format_spec:
            return format(self.min_price, format_spec)
        return f"{self.min_price:,} – {self.max_price:,}"

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption."""
        from brushrate.formatting import format_currency, format_price_range

        return {
            "min_price": self.min_price,
            "max_price": self.max_price,
            "tier_label": self.tier_label,
            "min_price_formatted": format_currency(self.min_price),
            "max_price_formatted": format_currency(self.max_price),
            "range_formatted": format_price_range(self),
            "disclaimer": (
                "An official estimate requires an on-site consultation "
                "with our team."
            ),
        }
