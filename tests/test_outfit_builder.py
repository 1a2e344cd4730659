"""Candidate generation: grouping, dress outfits and separates."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.item_grouping import group_items, item_desirability
from logic.outfit_builder import (
    FORMALITY_CLASH_PENALTY,
    OUTERWEAR_BONUS,
    SHOES_BONUS,
    STYLE_CLASH_PENALTY,
    EngineLimits,
    generate_candidates,
)
from models.clothing_item import ClothingItem
from models.taxonomy import Category
from models.weather import WeatherSnapshot


def _item(item_id: str, category: str, **attributes) -> ClothingItem:
    attributes.setdefault("color", "Black")
    attributes.setdefault("warmth_level", "medium")
    return ClothingItem(item_id=item_id, category=category, **attributes)


def test_item_desirability_combines_attributes():
    plain = _item("plain", "top")
    loved = _item(
        "loved", "top", versatility_score=8, condition_status="Excellent", compliment_frequency="Always"
    )
    assert item_desirability(plain) == 50
    assert item_desirability(loved) == 50 + 40 + 15 + 20


def test_group_items_orders_buckets_and_keeps_ties_stable():
    items = [
        _item("t1", "top"),
        _item("t2", "top", versatility_score=9),
        _item("t3", "top"),
        _item("b1", "bottom"),
    ]
    grouped = group_items(items)

    assert set(grouped) == {Category.TOP, Category.BOTTOM}
    assert [item.item_id for item in grouped[Category.TOP]] == ["t2", "t1", "t3"]


def test_dress_outfit_skips_incompatible_shoes():
    grouped = group_items(
        [_item("d", "dress", formality_level="Formal"), _item("s", "shoes", formality_level="Very Casual")]
    )
    assert generate_candidates(grouped, None) == []


def test_dress_outfit_with_shoes_and_cold_weather_layer():
    grouped = group_items(
        [
            _item("d", "dress", color="Red"),
            _item("s", "shoes"),
            _item("coat", "outerwear", warmth_level="heavy"),
        ]
    )
    [outfit] = generate_candidates(grouped, WeatherSnapshot(temperature=4, condition="Clear"))

    assert [item.item_id for item in outfit.items] == ["d", "s", "coat"]
    assert outfit.clauses[0] == "Elegant dress-based outfit featuring a Red dress"
    assert "Paired with complementary footwear" in outfit.clauses
    assert "Added weather-appropriate outerwear" in outfit.clauses
    assert outfit.adjustment == SHOES_BONUS + OUTERWEAR_BONUS


def test_jackets_are_tried_before_outerwear():
    grouped = group_items(
        [
            _item("t", "top"),
            _item("b", "bottom"),
            _item("coat", "outerwear", versatility_score=10),
            _item("jacket", "jacket"),
        ]
    )
    [outfit] = generate_candidates(grouped, WeatherSnapshot(temperature=8, condition="Cloudy"))
    assert outfit.items[-1].item_id == "jacket"


def test_no_outer_layer_in_mild_dry_weather():
    grouped = group_items([_item("t", "top"), _item("b", "bottom"), _item("coat", "outerwear")])
    [outfit] = generate_candidates(grouped, WeatherSnapshot(temperature=18, condition="Clear"))
    assert [item.item_id for item in outfit.items] == ["t", "b"]


def test_separates_penalties_are_recorded():
    grouped = group_items(
        [
            _item("t", "top", style_aesthetic=["Bohemian"], formality_level="Black Tie"),
            _item("b", "bottom", style_aesthetic=["Preppy"], formality_level="Very Casual"),
        ]
    )
    [outfit] = generate_candidates(grouped, None)

    assert outfit.adjustment == STYLE_CLASH_PENALTY + FORMALITY_CLASH_PENALTY
    assert "Style mixing may require careful coordination" in outfit.clauses
    assert "Mixed formality levels" in outfit.clauses


def test_limits_cap_explored_items_and_dresses_come_first():
    items = [_item(f"t{i}", "top") for i in range(5)]
    items += [_item(f"b{i}", "bottom") for i in range(4)]
    items += [_item(f"d{i}", "dress") for i in range(3)]
    items.append(_item("s", "shoes"))

    candidates = generate_candidates(group_items(items), None)
    assert len(candidates) == 2 + 3 * 2
    assert all(candidate.items[0].category is Category.DRESS for candidate in candidates[:2])

    narrow = generate_candidates(group_items(items), None, EngineLimits(max_dresses=0, max_tops=1, max_bottoms=1))
    assert len(narrow) == 1


def test_accessories_alone_never_form_outfits():
    grouped = group_items([_item("a1", "accessory"), _item("a2", "accessory")])
    assert generate_candidates(grouped, None) == []


def test_outer_layer_must_sit_above_the_top():
    grouped = group_items(
        [
            _item("t", "top", layering_position="Outer Layer"),
            _item("b", "bottom"),
            _item("jacket", "jacket", versatility_score=10),
            _item("cape", "outerwear", layering_position="Statement Piece"),
        ]
    )
    [outfit] = generate_candidates(grouped, WeatherSnapshot(temperature=8, condition="Clear"))
    assert [item.item_id for item in outfit.items] == ["t", "b", "cape"]

    without_statement = group_items(
        [_item("t", "top", layering_position="Outer Layer"), _item("b", "bottom"), _item("jacket", "jacket")]
    )
    [bare] = generate_candidates(without_statement, WeatherSnapshot(temperature=8, condition="Clear"))
    assert [item.item_id for item in bare.items] == ["t", "b"]


def test_rain_prefers_protected_outerwear_over_unprotected_jacket():
    grouped = group_items(
        [
            _item("t", "top"),
            _item("b", "bottom"),
            _item("jacket", "jacket", versatility_score=10),
            _item("mac", "outerwear", water_resistance="Waterproof"),
        ]
    )
    [outfit] = generate_candidates(grouped, WeatherSnapshot(temperature=12, condition="Rain"))
    assert outfit.items[-1].item_id == "mac"


def test_dress_skips_outerwear_in_mild_snow_while_separates_layer_up():
    grouped = group_items(
        [
            _item("d", "dress"),
            _item("t", "top"),
            _item("b", "bottom"),
            _item("s", "shoes"),
            _item("coat", "outerwear", warmth_level="heavy"),
        ]
    )
    dress_outfit, separates_outfit = generate_candidates(grouped, WeatherSnapshot(temperature=12, condition="Snow"))

    assert [item.item_id for item in dress_outfit.items] == ["d", "s"]
    assert "Added weather-appropriate outerwear" not in dress_outfit.clauses
    assert [item.item_id for item in separates_outfit.items] == ["t", "b", "s", "coat"]


def test_dress_takes_next_shoe_when_best_ranked_clashes():
    grouped = group_items(
        [
            _item("d", "dress", style_aesthetic=["Elegant"]),
            _item("trainers", "shoes", style_aesthetic=["Sporty"], versatility_score=9),
            _item("pumps", "shoes", style_aesthetic=["Sophisticated"]),
        ]
    )
    [outfit] = generate_candidates(grouped, None)
    assert [item.item_id for item in outfit.items] == ["d", "pumps"]


def test_reasoning_omits_missing_colours():
    grouped = group_items(
        [_item("d", "dress", color=""), _item("s", "shoes"), _item("t", "top", color=""), _item("b", "bottom", color=None)]
    )
    dress_outfit, separates_outfit = generate_candidates(grouped, None)

    assert dress_outfit.clauses[0] == "Elegant dress-based outfit featuring a dress"
    assert separates_outfit.clauses[0] == "Coordinated outfit with top and bottom"
