"""Tests for remote FoodData Central lookups."""

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import pytest

from health_tracker.adapters.fdc_client import FdcClient
from health_tracker.services.cache import InMemoryCache
from health_tracker.services.nutrition import NutritionService


@dataclass
class CountingFdcClient(FdcClient):
    search_calls: int = 0
    food_calls: int = 0
    failures_left: int = 0

    async def search_foods(self, query: str, page_size: int = 10) -> dict[str, object]:
        self.search_calls += 1
        if self.failures_left:
            self.failures_left -= 1
            raise RuntimeError("FDC unavailable")
        return {
            "foods": [
                {
                    "fdcId": 999,
                    "description": "Kirkland chicken breast",
                    "brandOwner": "Costco",
                    "brandName": "Kirkland",
                    "dataType": "Branded",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 165},
                        {"nutrientId": 1003, "value": 31},
                    ],
                }
            ]
        }

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls += 1
        return {
            "fdcId": fdc_id,
            "description": "Kirkland chicken breast",
            "brandOwner": "Costco",
            "dataType": "Branded",
            "servingSize": 100,
            "foodNutrients": [
                {"nutrient": {"id": 1008}, "amount": 165},
                {"nutrient": {"id": 1003}, "amount": 31},
                {"nutrient": {"id": 1004}, "amount": 3.6},
                {"nutrient": {"id": 1005}, "amount": 0},
                {"nutrient": {"id": 9999}, "amount": 12},
            ],
        }


def _service(client: CountingFdcClient, cache: InMemoryCache | None = None) -> NutritionService:
    return NutritionService(client, cache or InMemoryCache(), retry_delay_seconds=0)


def test_search_uses_cache() -> None:
    client = CountingFdcClient()
    service = _service(client)

    results = asyncio.run(service.search_remote("Kirkland", limit=1))
    assert results[0].fdc_id == 999
    assert results[0].brand == "Kirkland"
    assert results[0].nutrition.calories == 165
    assert client.search_calls == 1

    cached = asyncio.run(service.search_remote("  kirkland ", limit=1))
    assert cached[0].fdc_id == 999
    assert client.search_calls == 1


def test_get_food_maps_detail_nutrients() -> None:
    client = CountingFdcClient()
    service = _service(client)

    food = asyncio.run(service.get_remote_food(999))
    asyncio.run(service.get_remote_food(999))

    assert food.brand == "Costco"
    assert food.serving_size_g == 100
    assert food.nutrition.calories == 165
    assert food.nutrition.protein == 31
    assert food.nutrition.fat == 3.6
    assert food.nutrition.carbs == 0
    assert client.food_calls == 1


def test_search_retries_once() -> None:
    client = CountingFdcClient(failures_left=1)

    results = asyncio.run(_service(client).search_remote("chicken"))

    assert len(results) == 1
    assert client.search_calls == 2


def test_search_gives_up_after_retry() -> None:
    client = CountingFdcClient(failures_left=2)

    with pytest.raises(RuntimeError):
        asyncio.run(_service(client).search_remote("chicken"))
    assert client.search_calls == 2


def test_cache_entries_expire() -> None:
    now = datetime(2024, 6, 15, tzinfo=UTC)
    cache = InMemoryCache(clock=lambda: now)
    cache.set("key", "value", ttl_seconds=60)
    assert cache.get("key") == "value"

    now += timedelta(seconds=61)

    assert cache.get("key") is None
    assert len(cache) == 0


def test_cache_evicts_oldest_entry() -> None:
    cache = InMemoryCache(max_entries=2)
    cache.set("a", 1, ttl_seconds=60)
    cache.set("b", 2, ttl_seconds=60)
    cache.set("c", 3, ttl_seconds=60)

    assert cache.get("a") is None
    assert cache.get("c") == 3
