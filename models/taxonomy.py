"""Canonical taxonomy for clothing item attributes.

Every enumerable attribute produced by the vision analysis or the manual entry
form is modelled as a closed enumeration with an explicit fallback member.
``parse_label`` is the single place where loose strings are turned into
members, so scoring code can compare members instead of raw strings.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple, Type, TypeVar

E = TypeVar("E", bound=Enum)


def _normalize_key(value: object) -> str:
    """Collapse case, separators and whitespace in a free-form label."""

    text = str(value).strip().lower().replace("_", " ").replace("-", " ")
    return " ".join(text.split())


class Category(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    DRESS = "dress"
    JACKET = "jacket"
    OUTERWEAR = "outerwear"
    SHOES = "shoes"
    ACCESSORY = "accessory"
    OTHER = "other"


class WarmthLevel(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    UNSPECIFIED = "unspecified"


class FormalityLevel(str, Enum):
    VERY_CASUAL = "Very Casual"
    CASUAL = "Casual"
    SMART_CASUAL = "Smart Casual"
    BUSINESS_CASUAL = "Business Casual"
    FORMAL = "Formal"
    BLACK_TIE = "Black Tie"
    UNSPECIFIED = "Unspecified"


class LayeringPosition(str, Enum):
    BASE_LAYER = "Base Layer"
    MID_LAYER = "Mid Layer"
    OUTER_LAYER = "Outer Layer"
    STATEMENT_PIECE = "Statement Piece"
    UNSPECIFIED = "Unspecified"


class WaterResistance(str, Enum):
    NONE = "None"
    WATER_REPELLENT = "Water Repellent"
    WATER_RESISTANT = "Water Resistant"
    WATERPROOF = "Waterproof"
    UNSPECIFIED = "Unspecified"


class ColorIntensity(str, Enum):
    PASTEL = "Pastel"
    LIGHT = "Light"
    MEDIUM = "Medium"
    DARK = "Dark"
    VIBRANT = "Vibrant"
    UNSPECIFIED = "Unspecified"


class ConditionStatus(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    NEEDS_REPAIR = "Needs Repair"
    UNSPECIFIED = "Unspecified"


class ComplimentFrequency(str, Enum):
    NEVER = "Never"
    RARELY = "Rarely"
    SOMETIMES = "Sometimes"
    OFTEN = "Often"
    ALWAYS = "Always"
    UNSPECIFIED = "Unspecified"


class Breathability(str, Enum):
    VERY_BREATHABLE = "Very Breathable"
    BREATHABLE = "Breathable"
    MODERATE = "Moderate"
    LOW = "Low"
    NOT_BREATHABLE = "Not Breathable"
    UNSPECIFIED = "Unspecified"


FORMALITY_SCALE: Tuple[FormalityLevel, ...] = (
    FormalityLevel.VERY_CASUAL,
    FormalityLevel.CASUAL,
    FormalityLevel.SMART_CASUAL,
    FormalityLevel.BUSINESS_CASUAL,
    FormalityLevel.FORMAL,
    FormalityLevel.BLACK_TIE,
)

LAYERING_ORDER: Tuple[LayeringPosition, ...] = (
    LayeringPosition.BASE_LAYER,
    LayeringPosition.MID_LAYER,
    LayeringPosition.OUTER_LAYER,
    LayeringPosition.STATEMENT_PIECE,
)

OUTER_LAYER_CATEGORIES = (Category.JACKET, Category.OUTERWEAR)

_FALLBACKS = {Category: Category.OTHER}


def fallback_member(enum_cls: Type[E]) -> E:
    """Return the member used for absent or unrecognised labels."""

    if enum_cls in _FALLBACKS:
        return _FALLBACKS[enum_cls]  # type: ignore[return-value]
    return enum_cls["UNSPECIFIED"]


def parse_label(enum_cls: Type[E], value: object) -> E:
    """Map a loose label onto ``enum_cls``, degrading to its fallback member."""

    if isinstance(value, enum_cls):
        return value
    if value is None:
        return fallback_member(enum_cls)
    key = _normalize_key(value)
    for member in enum_cls:
        if key in (_normalize_key(member.value), _normalize_key(member.name)):
            return member
    return fallback_member(enum_cls)


def normalise_tags(values: Optional[Iterable[object]]) -> Tuple[str, ...]:
    """Strip and deduplicate free-text tags while preserving their order."""

    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    seen = set()
    tags: List[str] = []
    for value in values:
        text = str(value).strip()
        if text and text.lower() not in seen:
            tags.append(text)
            seen.add(text.lower())
    return tuple(tags)


__all__ = [
    "Category",
    "WarmthLevel",
    "FormalityLevel",
    "LayeringPosition",
    "WaterResistance",
    "ColorIntensity",
    "ConditionStatus",
    "ComplimentFrequency",
    "Breathability",
    "FORMALITY_SCALE",
    "LAYERING_ORDER",
    "OUTER_LAYER_CATEGORIES",
    "fallback_member",
    "parse_label",
    "normalise_tags",
]
