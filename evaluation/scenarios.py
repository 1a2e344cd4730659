"""Evaluation scenarios covering weather, formality and preference behaviour."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.preferences import PreferenceProfile
from models.weather import WeatherSnapshot


@dataclass
class EvaluationScenario:
    name: str
    description: str
    wardrobe_items: List[Dict[str, object]]
    weather: Optional[WeatherSnapshot]
    preferences: Optional[PreferenceProfile] = None
    expectations: Dict[str, object] = field(default_factory=dict)


def _item(item_id: str, category: str, color: str, warmth: str = "medium", **extra: object) -> Dict[str, object]:
    return {"id": item_id, "category": category, "color": color, "warmth_level": warmth, "tags": [], **extra}


_BASICS = [
    _item("top-blue", "top", "Blue"),
    _item("bottom-black", "bottom", "Black"),
    _item("shoes-black", "shoes", "Black"),
]

SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="mild_basics",
        description="A blue top, black bottom and black shoes on a clear 20°C day.",
        wardrobe_items=list(_BASICS),
        weather=WeatherSnapshot(temperature=20, condition="Clear"),
        expectations={
            "exact_outfits": 1,
            "first_item_ids": ["top-blue", "bottom-black", "shoes-black"],
            "min_top_score": 100,
        },
    ),
    EvaluationScenario(
        name="snow_day_layers",
        description="The same basics plus a heavy waterproof coat at 2°C in snow.",
        wardrobe_items=list(_BASICS)
        + [_item("coat-heavy", "outerwear", "Gray", "heavy", water_resistance="Waterproof")],
        weather=WeatherSnapshot(temperature=2, condition="Snow"),
        expectations={
            "first_contains": "coat-heavy",
            "reasoning_mentions": "weather protection",
        },
    ),
    EvaluationScenario(
        name="formal_dress_casual_shoes",
        description="A formal dress cannot be paired with very casual shoes.",
        wardrobe_items=[
            _item("dress-formal", "dress", "Black", formality_level="Formal"),
            _item("flip-flops", "shoes", "White", "light", formality_level="Very Casual"),
        ],
        weather=WeatherSnapshot(temperature=22, condition="Clear"),
        expectations={"exact_outfits": 0},
    ),
    EvaluationScenario(
        name="preferred_red",
        description="A preferred red top outranks an otherwise identical blue top.",
        wardrobe_items=[
            _item("top-blue", "top", "Blue"),
            _item("top-red", "top", "Bright Red"),
            _item("bottom-black", "bottom", "Black"),
        ],
        weather=WeatherSnapshot(temperature=18, condition="Clouds"),
        preferences=PreferenceProfile(preferred_colors=("red",)),
        expectations={"first_contains": "top-red", "strictly_ordered": True},
    ),
    EvaluationScenario(
        name="accessories_only",
        description="Accessories alone never form an outfit.",
        wardrobe_items=[_item("scarf", "accessory", "Red"), _item("belt", "accessory", "Brown")],
        weather=None,
        expectations={"exact_outfits": 0},
    ),
    EvaluationScenario(
        name="empty_wardrobe",
        description="An empty wardrobe yields no suggestions rather than an error.",
        wardrobe_items=[],
        weather=WeatherSnapshot(temperature=12, condition="Rain"),
        expectations={"exact_outfits": 0},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
