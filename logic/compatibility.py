"""Pairwise compatibility checks between clothing items.

All predicates are total: an absent attribute resolves to a permissive
default instead of raising.
"""

from __future__ import annotations

from typing import FrozenSet, Optional, Tuple

from models.clothing_item import ClothingItem
from models.color_theory import colors_match
from models.taxonomy import (
    FORMALITY_SCALE,
    LAYERING_ORDER,
    OUTER_LAYER_CATEGORIES,
    FormalityLevel,
    LayeringPosition,
    WarmthLevel,
    WaterResistance,
)
from models.weather import WeatherSnapshot

COMPATIBLE_STYLE_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("classic", "minimalist"),
    ("chic", "modern"),
    ("casual", "streetwear"),
    ("elegant", "sophisticated"),
    ("trendy", "modern"),
)

MAX_FORMALITY_GAP = 1
DEFAULT_FORMALITY = FormalityLevel.CASUAL
DEFAULT_OUTER_POSITION = LayeringPosition.OUTER_LAYER
DEFAULT_INNER_POSITION = LayeringPosition.MID_LAYER

UNPROTECTED = (WaterResistance.NONE, WaterResistance.UNSPECIFIED)


def _styles(item: ClothingItem) -> FrozenSet[str]:
    return frozenset(style.lower() for style in item.style_aesthetic)


def is_style_compatible(first: ClothingItem, second: ClothingItem) -> bool:
    styles1, styles2 = _styles(first), _styles(second)
    if not styles1 or not styles2:
        return True
    if styles1 & styles2:
        return True
    return any(
        (a in styles1 and b in styles2) or (b in styles1 and a in styles2)
        for a, b in COMPATIBLE_STYLE_PAIRS
    )


def formality_index(item: ClothingItem) -> int:
    level = item.formality_level
    if level not in FORMALITY_SCALE:
        level = DEFAULT_FORMALITY
    return FORMALITY_SCALE.index(level)


def is_formality_compatible(first: ClothingItem, second: ClothingItem) -> bool:
    return abs(formality_index(first) - formality_index(second)) <= MAX_FORMALITY_GAP


def is_weather_appropriate(item: ClothingItem, weather: Optional[WeatherSnapshot]) -> bool:
    """Check warmth and rain protection against the current conditions.

    Unprotected tops and bottoms stay acceptable in the rain as base layers;
    an unprotected jacket or outerwear piece does not count as rain gear.
    """

    if weather is None:
        return True
    if weather.temperature < 5 and item.warmth_level is WarmthLevel.LIGHT:
        return False
    if weather.temperature > 25 and item.warmth_level is WarmthLevel.HEAVY:
        return False
    if "rain" in weather.condition_text and item.water_resistance in UNPROTECTED:
        return item.category not in OUTER_LAYER_CATEGORIES
    return True


def _layer_index(position: LayeringPosition, default: LayeringPosition) -> int:
    if position not in LAYERING_ORDER:
        position = default
    return LAYERING_ORDER.index(position)


def is_layering_compatible(outer: ClothingItem, inner: ClothingItem) -> bool:
    """True when ``outer`` sits strictly above ``inner`` in the layer stack."""

    outer_index = _layer_index(outer.layering_position, DEFAULT_OUTER_POSITION)
    inner_index = _layer_index(inner.layering_position, DEFAULT_INNER_POSITION)
    return outer_index > inner_index


def is_color_compatible(first: ClothingItem, second: ClothingItem) -> bool:
    return colors_match(first.color, second.color)


__all__ = [
    "COMPATIBLE_STYLE_PAIRS",
    "is_style_compatible",
    "formality_index",
    "is_formality_compatible",
    "is_weather_appropriate",
    "is_layering_compatible",
    "is_color_compatible",
]
