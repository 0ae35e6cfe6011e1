"""Nutrition database queries and optional USDA FDC lookups."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

from health_tracker.adapters.fdc_client import FdcClient
from health_tracker.catalogs.foods import FOODS
from health_tracker.domain.catalog import Nutrients, NutritionItem
from health_tracker.domain.entries import FoodEntry, MealType
from health_tracker.domain.nutrition import RemoteFood
from health_tracker.services.cache import Cache

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_logger = logging.getLogger(__name__)

_NUTRIENT_IDS = {
    1008: "calories",
    1003: "protein",
    1005: "carbs",
    1004: "fat",
    1079: "fiber",
    2000: "sugar",
    1093: "sodium",
}


def search_foods(
    query: str, foods: Iterable[NutritionItem] = FOODS
) -> list[NutritionItem]:
    """Case-insensitive substring match on name, category, brand and tags."""
    needle = query.strip().lower()
    return [
        item
        for item in foods
        if needle in item.name.lower()
        or needle in item.category.lower()
        or (item.brand is not None and needle in item.brand.lower())
        or any(needle in tag.lower() for tag in item.tags)
    ]


def foods_by_category(
    category: str, foods: Iterable[NutritionItem] = FOODS
) -> list[NutritionItem]:
    return [item for item in foods if item.category == category]


def foods_by_tag(tag: str, foods: Iterable[NutritionItem] = FOODS) -> list[NutritionItem]:
    return [item for item in foods if tag in item.tags]


def get_food(food_id: str, foods: Iterable[NutritionItem] = FOODS) -> NutritionItem | None:
    return next((item for item in foods if item.id == food_id), None)


def nutrition_for_serving(item: NutritionItem, multiplier: float) -> Nutrients:
    """Scale every nutrient by the serving multiplier, rounded to 0.1."""
    return Nutrients(
        **{
            nutrient.name: round(getattr(item.nutrition, nutrient.name) * multiplier, 1)
            for nutrient in fields(Nutrients)
        }
    )


def total_nutrition(portions: Iterable[tuple[NutritionItem, float]]) -> Nutrients:
    """Sum scaled nutrients over (item, servings) pairs."""
    total = Nutrients()
    for item, servings in portions:
        scaled = nutrition_for_serving(item, servings)
        total = Nutrients(
            **{
                nutrient.name: round(
                    getattr(total, nutrient.name) + getattr(scaled, nutrient.name), 1
                )
                for nutrient in fields(Nutrients)
            }
        )
    return total


def food_entry_from_item(
    item: NutritionItem, quantity: float, meal: MealType
) -> FoodEntry:
    """Build a food log entry from a catalog item."""
    nutrition = item.nutrition
    return FoodEntry(
        name=item.name,
        brand=item.brand,
        calories=nutrition.calories,
        protein=nutrition.protein,
        carbs=nutrition.carbs,
        fat=nutrition.fat,
        fiber=nutrition.fiber,
        sugar=nutrition.sugar,
        sodium=nutrition.sodium,
        serving=f"{item.serving.amount:g} {item.serving.unit}",
        quantity=quantity,
        meal=meal,
    )


@dataclass
class NutritionService:
    """Remote food lookups with caching."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search_remote(self, query: str, limit: int = 5) -> list[RemoteFood]:
        """Search FDC foods, serving repeated queries from the cache."""
        cache_key = f"fdc:search:{query.strip().lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=limit),
            action="search",
        )
        foods = [_parse_food(food) for food in payload.get("foods", [])]
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.debug("FDC search", extra={"query": query, "results": len(foods)})
        return foods

    async def get_remote_food(self, fdc_id: int) -> RemoteFood:
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, RemoteFood):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action="get_food",
        )
        food = _parse_food(payload)
        self.cache.set(cache_key, food, ttl_seconds=self.food_ttl_seconds)
        return food

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "FDC %s failed",
                    action,
                    extra={
                        "attempt": attempt,
                        "max_attempts": self.retry_attempts + 1,
                        "status": _status_code_from_exception(exc),
                    },
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _parse_food(payload: dict[str, object]) -> RemoteFood:
    return RemoteFood(
        fdc_id=int(payload["fdcId"]),
        description=str(payload.get("description", "")),
        brand=payload.get("brandName") or payload.get("brandOwner"),
        data_type=payload.get("dataType"),
        nutrition=_extract_nutrients(payload.get("foodNutrients", [])),
        serving_size_g=payload.get("servingSize"),
    )


def _extract_nutrients(food_nutrients: list[dict[str, object]]) -> Nutrients:
    """Map FDC nutrient ids onto Nutrients; search uses value, detail uses amount."""
    nutrients = Nutrients()
    for nutrient in food_nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        name = _NUTRIENT_IDS.get(nutrient_id)
        amount = nutrient.get("amount", nutrient.get("value"))
        if name is None or amount is None:
            continue
        nutrients = replace(nutrients, **{name: float(amount)})
    return nutrients
