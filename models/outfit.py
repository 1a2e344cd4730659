"""Outfit schemas: generator candidates, ranked suggestions and saved outfits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.clothing_item import ClothingItem

REASONING_SEPARATOR = ". "


@dataclass
class CandidateOutfit:
    """An unscored combination produced by the generator.

    ``adjustment`` carries the structural bonuses and penalties applied while
    the outfit was assembled; ``clauses`` is the reasoning trail so far, the
    first entry being the base description.
    """

    items: List[ClothingItem]
    clauses: List[str]
    adjustment: int = 0
    source: str = "local"

    def note(self, clause: str, points: int = 0) -> None:
        self.clauses.append(clause)
        self.adjustment += points

    @property
    def reasoning(self) -> str:
        return REASONING_SEPARATOR.join(self.clauses)


@dataclass(frozen=True)
class OutfitSuggestion:
    """A scored, ranked outfit returned to the caller."""

    items: Tuple[ClothingItem, ...]
    score: float
    reasoning: str
    breakdown: Dict[str, float] = field(default_factory=dict, compare=False)
    source: str = "local"

    @property
    def item_ids(self) -> List[str]:
        return [item.item_id for item in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "item_ids": self.item_ids,
            "score": self.score,
            "reasoning": self.reasoning,
            "breakdown": dict(self.breakdown),
            "source": self.source,
        }


@dataclass
class SavedOutfit:
    """Persisted outfit record as kept by the application's record store."""

    outfit_id: str
    user_id: str
    item_ids: List[str]
    name: Optional[str] = None
    weather_condition: Optional[str] = None
    temperature: Optional[float] = None
    rating: Optional[int] = None
    is_favorite: bool = False

    def __post_init__(self) -> None:
        if self.rating is not None and not 1 <= int(self.rating) <= 5:
            raise ValueError(f"Outfit rating must be between 1 and 5, got {self.rating}")
        self.item_ids = [str(item_id) for item_id in self.item_ids]

    def resolve_items(self, wardrobe: Iterable[ClothingItem]) -> List[ClothingItem]:
        """Return the referenced items that still exist, in saved order."""

        by_id = {item.item_id: item for item in wardrobe}
        return [by_id[item_id] for item_id in self.item_ids if item_id in by_id]

    @classmethod
    def from_suggestion(
        cls,
        outfit_id: str,
        user_id: str,
        suggestion: OutfitSuggestion,
        weather_condition: Optional[str] = None,
        temperature: Optional[float] = None,
        name: Optional[str] = None,
    ) -> "SavedOutfit":
        return cls(
            outfit_id=outfit_id,
            user_id=user_id,
            item_ids=suggestion.item_ids,
            name=name,
            weather_condition=weather_condition,
            temperature=temperature,
        )


__all__ = ["CandidateOutfit", "OutfitSuggestion", "SavedOutfit", "REASONING_SEPARATOR"]
