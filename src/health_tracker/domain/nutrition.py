"""Nutrition domain models for remote food lookups."""

from dataclasses import dataclass

from health_tracker.domain.catalog import Nutrients


@dataclass(frozen=True)
class RemoteFood:
    """A food returned by USDA FoodData Central."""

    fdc_id: int
    description: str
    brand: str | None
    data_type: str | None
    nutrition: Nutrients
    serving_size_g: float | None = None
