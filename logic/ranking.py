"""Ranking of scored outfits and the public ``rank_outfits`` entry point."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from logic.item_grouping import group_items
from logic.outfit_builder import DEFAULT_LIMITS, EngineLimits, generate_candidates
from logic.outfit_scoring import score_candidate
from models.clothing_item import ClothingItem
from models.outfit import CandidateOutfit, OutfitSuggestion
from models.preferences import PreferenceProfile
from models.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


def rank_suggestions(suggestions: Iterable[OutfitSuggestion], limit: int = DEFAULT_LIMITS.max_suggestions) -> List[OutfitSuggestion]:
    """Highest score first; ties keep generation order."""

    ranked = sorted(suggestions, key=lambda suggestion: suggestion.score, reverse=True)
    return ranked[: max(0, limit)]


def score_and_rank(
    candidates: Sequence[CandidateOutfit],
    weather: Optional[WeatherSnapshot],
    preferences: Optional[PreferenceProfile],
    limit: int = DEFAULT_LIMITS.max_suggestions,
) -> List[OutfitSuggestion]:
    scored = [score_candidate(candidate, weather, preferences) for candidate in candidates]
    return rank_suggestions(scored, limit)


def rank_outfits(
    items: Sequence[ClothingItem],
    weather: Optional[WeatherSnapshot] = None,
    preferences: Optional[PreferenceProfile] = None,
    limits: EngineLimits = DEFAULT_LIMITS,
) -> List[OutfitSuggestion]:
    """Propose up to ``limits.max_suggestions`` outfits for a wardrobe.

    Pure and deterministic: the same inputs always give the same ordered
    result. An empty wardrobe, or one without anchor pieces, yields ``[]``.
    """

    if not items:
        return []
    grouped = group_items(items)
    candidates = generate_candidates(grouped, weather, limits)
    ranked = score_and_rank(candidates, weather, preferences, limits.max_suggestions)
    logger.info(
        "Ranked %s of %s candidates, best score %s",
        len(ranked),
        len(candidates),
        ranked[0].score if ranked else None,
    )
    return ranked


__all__ = ["rank_outfits", "rank_suggestions", "score_and_rank"]
