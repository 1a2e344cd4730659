"""Service layer: request validation, weather resolution and response shape."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from agents.outfit_stylist_agent import OutfitStylistAgent
from models.weather import WeatherSnapshot
from stylist_app.config import StylistConfig
from tools.weather_provider import MockWeatherProvider, WeatherProvider

WARDROBE = [
    {"id": "t1", "category": "top", "color": "Blue", "warmth_level": "medium"},
    {"id": "t2", "category": "top", "color": "White", "warmth_level": "light"},
    {"id": "b1", "category": "bottom", "color": "Black", "warmth_level": "medium"},
    {"id": "b2", "category": "bottom", "color": "Beige", "warmth_level": "light"},
    {"id": "s1", "category": "shoes", "color": "Black", "warmth_level": "medium"},
    {"id": "j1", "category": "jacket", "color": "Navy", "warmth_level": "heavy", "water_resistance": "Waterproof"},
]


class _FailingProvider(WeatherProvider):
    def get_current_weather(self, city):
        raise ValueError("city is required")


def _agent(provider=None, **config):
    return OutfitStylistAgent(StylistConfig(**config), weather_provider=provider)


def test_recommend_uses_provider_weather_for_city():
    provider = MockWeatherProvider(WeatherSnapshot(temperature=6, condition="Rain", city="Leeds"))
    response = _agent(provider).recommend_outfits("user-1", WARDROBE, city="Leeds")

    assert response["status"] == "ok"
    assert provider.calls == ["Leeds"]
    assert response["weather"]["temperature"] == 6
    assert 0 < len(response["suggestions"]) <= 5
    assert all("j1" in suggestion["item_ids"] for suggestion in response["suggestions"])
    assert response["user_facing_rationale"].startswith("Generated")
    scores = response["debug_summary"]["scores"]
    assert scores == sorted(scores, reverse=True)


def test_explicit_weather_skips_provider():
    provider = MockWeatherProvider()
    weather = WeatherSnapshot(temperature=22, condition="Clear")
    response = _agent(provider).recommend_outfits("user-1", WARDROBE, weather=weather, city="Leeds")

    assert provider.calls == []
    assert response["weather"]["temperature"] == 22


def test_default_city_and_no_provider():
    provider = MockWeatherProvider()
    _agent(provider, default_city="Oslo").recommend_outfits("user-1", WARDROBE)
    assert provider.calls == ["Oslo"]

    response = _agent().recommend_outfits("user-1", WARDROBE, city="Oslo")
    assert response["weather"] is None
    assert response["suggestions"]


def test_provider_errors_do_not_abort_ranking():
    response = _agent(_FailingProvider()).recommend_outfits("user-1", WARDROBE, city="x")
    assert response["weather"] is None
    assert response["suggestions"]


def test_invalid_records_are_skipped():
    items = WARDROBE + [{"category": "top", "color": "Red"}, "not a record"]
    response = _agent().recommend_outfits("user-1", items)

    summary = response["debug_summary"]
    assert summary["wardrobe_size"] == len(WARDROBE)
    assert summary["skipped_records"] == ["<missing id>", "<missing id>"]


def test_limit_is_respected_and_capped_by_config():
    assert len(_agent().recommend_outfits("user-1", WARDROBE, limit=2)["suggestions"]) == 2
    assert len(_agent(max_suggestions=1).recommend_outfits("user-1", WARDROBE, limit=4)["suggestions"]) == 1


def test_empty_wardrobe_message():
    response = _agent().recommend_outfits("user-1", [])
    assert response["suggestions"] == []
    assert "Add a few more pieces" in response["user_facing_rationale"]


def test_ai_response_is_reconciled():
    ai = {"outfits": [{"name": "Crisp", "item_ids": ["t2", "b2", "zzz"]}], "general_tips": "Tuck it in"}
    response = _agent().recommend_outfits("user-1", WARDROBE, ai_response=ai)

    assert response["suggestions"][0]["source"] == "ai"
    assert response["general_tips"] == "Tuck it in"
    assert response["debug_summary"]["ai_fallback_used"] is False
    assert response["debug_summary"]["dropped_item_ids"] == ["zzz"]


def test_handle_request_validates_envelope():
    response = _agent().handle_request({"user_id": "", "items": WARDROBE, "limit": 9})

    assert response["status"] == "needs_review"
    locations = {tuple(detail["loc"]) for detail in response["details"]}
    assert ("user_id",) in locations
    assert ("limit",) in locations


def test_handle_request_runs_ranking():
    response = _agent().handle_request(
        {
            "user_id": "user-1",
            "items": WARDROBE,
            "weather": {"temperature": 3, "condition": "Snow", "windSpeed": 12},
            "preferences": {"preferred_colors": ["white"]},
            "limit": 3,
        }
    )

    assert response["status"] == "ok"
    assert response["weather"]["wind_speed"] == 12
    assert len(response["suggestions"]) == 3
    assert "t2" in response["suggestions"][0]["item_ids"]


def test_handle_request_forwards_ai_response():
    response = _agent().handle_request(
        {
            "user_id": "user-1",
            "items": WARDROBE,
            "ai_response": {"outfits": [{"name": "Crisp", "item_ids": ["t2", "b2"]}], "general_tips": "Roll the cuffs"},
        }
    )

    assert response["status"] == "ok"
    assert response["suggestions"][0]["source"] == "ai"
    assert response["suggestions"][0]["item_ids"] == ["t2", "b2"]
    assert response["general_tips"] == "Roll the cuffs"
    assert response["debug_summary"]["ai_fallback_used"] is False
