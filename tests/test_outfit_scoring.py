"""Scoring components and the combined outfit score."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.outfit_scoring import (
    harmony_bonus,
    preference_bonus,
    score_candidate,
    versatility_bonus,
    weather_bonus,
)
from models.clothing_item import ClothingItem
from models.outfit import CandidateOutfit
from models.preferences import PreferenceProfile
from models.weather import WeatherSnapshot


def _item(item_id: str, category: str = "top", **attributes) -> ClothingItem:
    attributes.setdefault("color", "Black")
    attributes.setdefault("warmth_level", "medium")
    return ClothingItem(item_id=item_id, category=category, **attributes)


def test_harmony_rewards_intensity_texture_and_patterns():
    items = [
        _item("a", color_intensity="Vibrant", texture="Smooth", pattern_design="Striped"),
        _item("b", "bottom", texture="Ribbed", pattern_design="Solid"),
    ]
    score, clauses = harmony_bonus(items)
    assert score == 10 + 8 + 12
    assert "Balanced color intensity" in clauses


def test_harmony_penalises_nothing_but_withholds_bonuses():
    items = [
        _item("a", color_intensity="Pastel", pattern_design="Floral"),
        _item("b", "bottom", color_intensity="Vibrant", pattern_design="Plaid"),
        _item("c", "shoes", color_intensity="Dark"),
    ]
    score, _ = harmony_bonus(items)
    assert score == 0


def test_harmony_counts_absent_intensity_as_medium():
    items = [_item("a", color_intensity="Vibrant"), _item("b"), _item("c", color_intensity="Medium")]
    score, _ = harmony_bonus(items)
    assert score == 10 + 12


@pytest.mark.parametrize(
    "temperature, warmths, expected",
    [
        (20, ["light", "light"], 15),
        (20, ["medium", "medium"], 10),
        (10, ["heavy", "light"], 15),
        (0, ["light", "light"], 5),
        (0, ["heavy", "heavy"], 15),
    ],
)
def test_weather_warmth_fit(temperature, warmths, expected):
    items = [_item(str(i), warmth_level=warmth) for i, warmth in enumerate(warmths)]
    score, _ = weather_bonus(items, WeatherSnapshot(temperature=temperature, condition="Clear"))
    assert score == expected


def test_weather_without_snapshot_scores_zero():
    assert weather_bonus([_item("a")], None) == (0, [])


def test_weather_rewards_protection_and_breathability():
    protected = [_item("a", warmth_level="heavy", water_resistance="Waterproof"), _item("b", warmth_level="heavy")]
    score, clauses = weather_bonus(protected, WeatherSnapshot(temperature=2, condition="Snow"))
    assert score == 15 + 15
    assert "Water-resistant pieces guard against the elements" in clauses

    hot = [_item("a", warmth_level="light", breathability="Very Breathable"), _item("b", warmth_level="light", breathability="Breathable")]
    score, _ = weather_bonus(hot, WeatherSnapshot(temperature=30, condition="Sunny"))
    assert score == 15 + 10


def test_preference_bonus_per_matching_item():
    prefs = PreferenceProfile(preferred_colors=["red"], preferred_categories=["top"])
    items = [_item("a", color="Bright Red"), _item("b", "bottom", color="Dark Red"), _item("c", "top", color="Blue")]
    score, clauses = preference_bonus(items, prefs)
    assert score == 8 * 2 + 5 * 2
    assert "Features your preferred colors" in clauses
    assert preference_bonus(items, None) == (0, [])


@pytest.mark.parametrize(
    "ratings, expected",
    [
        ([None, None], 0),
        ([10, 10], 10),
        ([1, 1], -8),
        ([6, 7], 3),
        ([5, 6], 1),
        ([4, 5], -1),
    ],
)
def test_versatility_bonus_rounds_half_up(ratings, expected):
    items = [_item(str(i), versatility_score=rating) for i, rating in enumerate(ratings)]
    score, _ = versatility_bonus(items)
    assert score == expected


def test_score_candidate_combines_parts_with_breakdown():
    candidate = CandidateOutfit(
        items=[_item("t", color="Blue"), _item("b", "bottom"), _item("s", "shoes")],
        clauses=["Coordinated outfit with Blue top and Black bottom"],
    )
    candidate.note("Completed with appropriate footwear", 15)

    suggestion = score_candidate(candidate, WeatherSnapshot(temperature=20, condition="Clear"))

    assert suggestion.score == 147
    assert suggestion.breakdown == {
        "base": 100,
        "structure": 15,
        "harmony": 22,
        "weather": 10,
        "preference": 0,
        "versatility": 0,
    }
    assert suggestion.reasoning.startswith("Coordinated outfit with Blue top and Black bottom. ")
    assert "Colors coordinate well" in suggestion.reasoning
    assert suggestion.item_ids == ["t", "b", "s"]


def test_score_is_floored_at_zero():
    candidate = CandidateOutfit(items=[_item("t"), _item("b", "bottom")], clauses=["Clash"], adjustment=-500)
    assert score_candidate(candidate).score == 0
