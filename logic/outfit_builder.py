"""Deterministic outfit candidate generation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from logic.compatibility import (
    is_formality_compatible,
    is_layering_compatible,
    is_style_compatible,
    is_weather_appropriate,
)
from models.clothing_item import ClothingItem
from models.outfit import CandidateOutfit
from models.taxonomy import Category
from models.weather import WeatherOutlook, WeatherSnapshot

logger = logging.getLogger(__name__)

MIN_OUTFIT_ITEMS = 2

SHOES_BONUS = 15
OUTERWEAR_BONUS = 20
STYLE_CLASH_PENALTY = -25
FORMALITY_CLASH_PENALTY = -20


@dataclass(frozen=True)
class EngineLimits:
    """Caps on how much of each pre-ranked bucket the generator explores."""

    max_dresses: int = 2
    max_tops: int = 3
    max_bottoms: int = 2
    max_suggestions: int = 5


DEFAULT_LIMITS = EngineLimits()


def _first_match(candidates: Sequence[ClothingItem], accept: Callable[[ClothingItem], bool]) -> Optional[ClothingItem]:
    for candidate in candidates:
        if accept(candidate):
            return candidate
    return None


def _outer_layers(grouped: Dict[Category, List[ClothingItem]]) -> List[ClothingItem]:
    return grouped.get(Category.JACKET, []) + grouped.get(Category.OUTERWEAR, [])


def build_dress_outfits(
    grouped: Dict[Category, List[ClothingItem]],
    weather: Optional[WeatherSnapshot],
    outlook: WeatherOutlook,
    limits: EngineLimits = DEFAULT_LIMITS,
) -> List[CandidateOutfit]:
    """Dress plus matching shoes, topped with outerwear when cold or wet."""

    shoes = grouped.get(Category.SHOES, [])
    outer_layers = _outer_layers(grouped)
    outfits: List[CandidateOutfit] = []
    for dress in grouped.get(Category.DRESS, [])[: limits.max_dresses]:
        outfit = CandidateOutfit(
            items=[dress],
            clauses=[f"Elegant dress-based outfit featuring a {dress.label}"],
        )
        shoe = _first_match(
            shoes, lambda s: is_style_compatible(dress, s) and is_formality_compatible(dress, s)
        )
        if shoe is not None:
            outfit.items.append(shoe)
            outfit.note("Paired with complementary footwear", SHOES_BONUS)

        if outlook.is_cold or outlook.is_raining:
            layer = _first_match(
                outer_layers,
                lambda o: is_weather_appropriate(o, weather) and is_formality_compatible(dress, o),
            )
            if layer is not None:
                outfit.items.append(layer)
                outfit.note("Added weather-appropriate outerwear", OUTERWEAR_BONUS)

        if len(outfit.items) >= MIN_OUTFIT_ITEMS:
            outfits.append(outfit)
        else:
            logger.debug("Dropped dress %s: no compatible companions", dress.item_id)
    return outfits


def build_separates_outfits(
    grouped: Dict[Category, List[ClothingItem]],
    weather: Optional[WeatherSnapshot],
    outlook: WeatherOutlook,
    limits: EngineLimits = DEFAULT_LIMITS,
) -> List[CandidateOutfit]:
    """Top and bottom pairs, completed with shoes and an outer layer if needed."""

    shoes = grouped.get(Category.SHOES, [])
    outer_layers = _outer_layers(grouped)
    bottoms = grouped.get(Category.BOTTOM, [])[: limits.max_bottoms]
    outfits: List[CandidateOutfit] = []
    for top in grouped.get(Category.TOP, [])[: limits.max_tops]:
        for bottom in bottoms:
            outfit = CandidateOutfit(
                items=[top, bottom],
                clauses=[f"Coordinated outfit with {top.label} and {bottom.label}"],
            )
            if not is_style_compatible(top, bottom):
                outfit.note("Style mixing may require careful coordination", STYLE_CLASH_PENALTY)
            if not is_formality_compatible(top, bottom):
                outfit.note("Mixed formality levels", FORMALITY_CLASH_PENALTY)

            shoe = _first_match(
                shoes, lambda s: is_formality_compatible(top, s) and is_formality_compatible(bottom, s)
            )
            if shoe is not None:
                outfit.items.append(shoe)
                outfit.note("Completed with appropriate footwear", SHOES_BONUS)

            if outlook.needs_outer_layer:
                layer = _first_match(
                    outer_layers,
                    lambda o: is_weather_appropriate(o, weather)
                    and is_formality_compatible(top, o)
                    and is_layering_compatible(o, top),
                )
                if layer is not None:
                    outfit.items.append(layer)
                    outfit.note("Enhanced with weather protection", OUTERWEAR_BONUS)

            if len(outfit.items) >= MIN_OUTFIT_ITEMS:
                outfits.append(outfit)
    return outfits


def generate_candidates(
    grouped: Dict[Category, List[ClothingItem]],
    weather: Optional[WeatherSnapshot],
    limits: EngineLimits = DEFAULT_LIMITS,
) -> List[CandidateOutfit]:
    """All dress-based candidates followed by all separates candidates."""

    outlook = WeatherOutlook.from_snapshot(weather)
    candidates = build_dress_outfits(grouped, weather, outlook, limits)
    candidates.extend(build_separates_outfits(grouped, weather, outlook, limits))
    logger.info(
        "Generated %s candidate outfits (cold=%s rain=%s snow=%s)",
        len(candidates),
        outlook.is_cold,
        outlook.is_raining,
        outlook.is_snowing,
    )
    return candidates


__all__ = [
    "EngineLimits",
    "DEFAULT_LIMITS",
    "MIN_OUTFIT_ITEMS",
    "build_dress_outfits",
    "build_separates_outfits",
    "generate_candidates",
]
