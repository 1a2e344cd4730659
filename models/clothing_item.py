"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

from models.taxonomy import (
    Breathability,
    Category,
    ColorIntensity,
    ComplimentFrequency,
    ConditionStatus,
    FormalityLevel,
    LayeringPosition,
    WarmthLevel,
    WaterResistance,
    normalise_tags,
    parse_label,
)

_ENUM_FIELDS = {
    "category": Category,
    "warmth_level": WarmthLevel,
    "formality_level": FormalityLevel,
    "layering_position": LayeringPosition,
    "water_resistance": WaterResistance,
    "color_intensity": ColorIntensity,
    "condition_status": ConditionStatus,
    "compliment_frequency": ComplimentFrequency,
    "breathability": Breathability,
}
_TAG_FIELDS = ("tags", "style_aesthetic", "season")
_TEXT_FIELDS = ("material_fabric", "pattern_design", "texture", "brand")


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _versatility(value: Any) -> Optional[int]:
    """Clamp a 1-10 versatility rating, dropping anything non-numeric."""

    if value is None or isinstance(value, bool):
        return None
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        return None
    if score <= 0:
        return None
    return min(score, 10)


@dataclass(frozen=True)
class ClothingItem:
    """One physical garment described by a tagged attribute bag.

    ``category`` and ``warmth_level`` are always present; every other
    attribute is optional and resolves to its ``UNSPECIFIED`` member or
    ``None`` when absent. Instances are immutable so a scoring pass can never
    alter the wardrobe it was given.
    """

    item_id: str
    category: Category
    color: str
    warmth_level: WarmthLevel
    tags: Tuple[str, ...] = ()
    user_id: Optional[str] = None
    image_url: Optional[str] = None
    style_aesthetic: Tuple[str, ...] = ()
    formality_level: FormalityLevel = FormalityLevel.UNSPECIFIED
    material_fabric: Optional[str] = None
    season: Tuple[str, ...] = ()
    pattern_design: Optional[str] = None
    color_intensity: ColorIntensity = ColorIntensity.UNSPECIFIED
    texture: Optional[str] = None
    water_resistance: WaterResistance = WaterResistance.UNSPECIFIED
    layering_position: LayeringPosition = LayeringPosition.UNSPECIFIED
    versatility_score: Optional[int] = None
    condition_status: ConditionStatus = ConditionStatus.UNSPECIFIED
    compliment_frequency: ComplimentFrequency = ComplimentFrequency.UNSPECIFIED
    breathability: Breathability = Breathability.UNSPECIFIED
    brand: Optional[str] = None

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "item_id", str(self.item_id))
        object.__setattr__(self, "color", str(self.color or "").strip())
        for name, enum_cls in _ENUM_FIELDS.items():
            object.__setattr__(self, name, parse_label(enum_cls, getattr(self, name)))
        for name in _TAG_FIELDS:
            object.__setattr__(self, name, normalise_tags(getattr(self, name)))
        for name in _TEXT_FIELDS:
            object.__setattr__(self, name, _clean_text(getattr(self, name)))
        object.__setattr__(self, "versatility_score", _versatility(self.versatility_score))

    @property
    def label(self) -> str:
        """Short human description such as ``"Navy top"``."""

        return f"{self.color} {self.category.value}".strip()

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for item_field in fields(self):
            value = getattr(self, item_field.name)
            if isinstance(value, tuple):
                value = list(value)
            elif hasattr(value, "value"):
                value = value.value
            payload[item_field.name] = value
        return payload

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ClothingItem":
        """Build an item from a store row or JSON payload.

        Accepts either ``id`` or ``item_id`` and ``owner_id`` as an alias for
        ``user_id``; unknown keys are ignored. Raises :class:`ValueError` if
        the record has no identifier.
        """

        item_id = record.get("item_id") or record.get("id")
        if not item_id:
            raise ValueError("Clothing record is missing an id")
        known = {item_field.name for item_field in fields(cls)}
        kwargs = {key: value for key, value in record.items() if key in known}
        kwargs["item_id"] = str(item_id)
        kwargs.setdefault("user_id", record.get("owner_id"))
        kwargs.setdefault("category", None)
        kwargs.setdefault("color", "")
        kwargs.setdefault("warmth_level", None)
        return cls(**kwargs)


__all__ = ["ClothingItem"]
