"""Composite scoring for candidate outfits."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple

from models.clothing_item import ClothingItem
from models.color_theory import palette_is_coordinated
from models.outfit import REASONING_SEPARATOR, CandidateOutfit, OutfitSuggestion
from models.preferences import PreferenceProfile
from models.taxonomy import Breathability, ColorIntensity, WaterResistance
from models.weather import WeatherOutlook, WeatherSnapshot, warmth_score

BASE_SCORE = 100

INTENSITY_BONUS = 10
TEXTURE_BONUS = 8
PATTERN_BONUS = 12
WARMTH_FIT_MAX = 15
WARMTH_FIT_STEP = 5
WATER_PROTECTION_BONUS = 15
BREATHABLE_BONUS = 5
PREFERRED_COLOR_BONUS = 8
PREFERRED_CATEGORY_BONUS = 5
DEFAULT_VERSATILITY = 5

BREATHABLE = (Breathability.VERY_BREATHABLE, Breathability.BREATHABLE)
UNPROTECTED = (WaterResistance.NONE, WaterResistance.UNSPECIFIED)

Scored = Tuple[float, List[str]]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def harmony_bonus(items: Sequence[ClothingItem]) -> Scored:
    """Reward balanced colour intensity, a small texture mix and restrained patterns."""

    score = 0
    clauses: List[str] = []
    intensities = {
        ColorIntensity.MEDIUM if item.color_intensity is ColorIntensity.UNSPECIFIED else item.color_intensity
        for item in items
    }
    if len(intensities) <= 2:
        score += INTENSITY_BONUS
        clauses.append("Balanced color intensity")

    textures = {item.texture.lower() for item in items if item.texture}
    if 2 <= len(textures) <= 3:
        score += TEXTURE_BONUS
        clauses.append("Pleasing mix of textures")

    patterned = [item for item in items if item.pattern_design and item.pattern_design.lower() != "solid"]
    if len(patterned) <= 1:
        score += PATTERN_BONUS
        if patterned:
            clauses.append(f"A single {patterned[0].pattern_design.lower()} piece keeps patterns in check")
    return score, clauses


def weather_bonus(items: Sequence[ClothingItem], weather: Optional[WeatherSnapshot]) -> Scored:
    """Warmth fit against the forecast, rain/snow protection and breathability."""

    if weather is None or not items:
        return 0, []
    outlook = WeatherOutlook.from_snapshot(weather)
    clauses: List[str] = []

    average_warmth = sum(warmth_score(item.warmth_level) for item in items) / len(items)
    warmth_gap = abs(average_warmth - outlook.target_warmth_score)
    score: float = max(0.0, WARMTH_FIT_MAX - warmth_gap * WARMTH_FIT_STEP)
    if warmth_gap == 0:
        clauses.append(f"Warmth suits {weather.temperature:g}°C")

    condition = outlook.condition
    if "rain" in condition or "snow" in condition:
        if any(item.water_resistance not in UNPROTECTED for item in items):
            score += WATER_PROTECTION_BONUS
            clauses.append("Water-resistant pieces guard against the elements")

    if outlook.temperature > 25:
        breathable = [item for item in items if item.breathability in BREATHABLE]
        if breathable:
            score += BREATHABLE_BONUS * len(breathable)
            clauses.append("Breathable fabrics for the heat")
    return score, clauses


def preference_bonus(items: Sequence[ClothingItem], preferences: Optional[PreferenceProfile]) -> Scored:
    if preferences is None or preferences.is_empty:
        return 0, []
    clauses: List[str] = []
    color_matches = [
        item
        for item in items
        if any(color in item.color.lower() for color in preferences.preferred_colors)
    ]
    category_matches = [item for item in items if item.category in preferences.preferred_categories]
    if color_matches:
        clauses.append("Features your preferred colors")
    if category_matches:
        clauses.append("Includes your favorite categories")
    score = PREFERRED_COLOR_BONUS * len(color_matches) + PREFERRED_CATEGORY_BONUS * len(category_matches)
    return score, clauses


def versatility_bonus(items: Sequence[ClothingItem]) -> Scored:
    if not items:
        return 0, []
    ratings = [item.versatility_score or DEFAULT_VERSATILITY for item in items]
    score = _round_half_up((sum(ratings) / len(ratings) - DEFAULT_VERSATILITY) * 2)
    if score > 0:
        return score, ["Built from versatile staples"]
    if score < 0:
        return score, ["Some pieces are harder to style"]
    return 0, []


def color_clauses(items: Sequence[ClothingItem]) -> List[str]:
    """Describe colour coordination; colour never changes the score."""

    if len(items) >= 2 and palette_is_coordinated([item.color for item in items]):
        return ["Colors coordinate well"]
    return []


def score_candidate(
    candidate: CandidateOutfit,
    weather: Optional[WeatherSnapshot] = None,
    preferences: Optional[PreferenceProfile] = None,
) -> OutfitSuggestion:
    """Combine base score, structural adjustments and every bonus into one result."""

    items = candidate.items
    parts: Dict[str, Scored] = {
        "harmony": harmony_bonus(items),
        "weather": weather_bonus(items, weather),
        "preference": preference_bonus(items, preferences),
        "versatility": versatility_bonus(items),
    }
    breakdown: Dict[str, float] = {"base": BASE_SCORE, "structure": candidate.adjustment}
    clauses = list(candidate.clauses) + color_clauses(items)
    for name, (points, part_clauses) in parts.items():
        breakdown[name] = points
        clauses.extend(part_clauses)

    total = sum(breakdown.values())
    return OutfitSuggestion(
        items=tuple(items),
        score=max(0, total),
        reasoning=REASONING_SEPARATOR.join(clauses),
        breakdown=breakdown,
        source=candidate.source,
    )


__all__ = [
    "BASE_SCORE",
    "harmony_bonus",
    "weather_bonus",
    "preference_bonus",
    "versatility_bonus",
    "score_candidate",
]
