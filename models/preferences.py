"""User preference profile used to bias outfit scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple

from models.taxonomy import Category, normalise_tags, parse_label


@dataclass(frozen=True)
class PreferenceProfile:
    preferred_colors: Tuple[str, ...] = ()
    preferred_categories: FrozenSet[Category] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        colors = tuple(color.lower() for color in normalise_tags(self.preferred_colors))
        raw_categories = self.preferred_categories or ()
        if isinstance(raw_categories, str):
            raw_categories = (raw_categories,)
        categories = frozenset(
            category
            for category in (parse_label(Category, value) for value in raw_categories)
            if category is not Category.OTHER
        )
        object.__setattr__(self, "preferred_colors", colors)
        object.__setattr__(self, "preferred_categories", categories)

    @property
    def is_empty(self) -> bool:
        return not self.preferred_colors and not self.preferred_categories

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "PreferenceProfile":
        return cls(
            preferred_colors=record.get("preferred_colors") or (),
            preferred_categories=record.get("preferred_categories") or (),
        )


__all__ = ["PreferenceProfile"]
