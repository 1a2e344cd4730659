"""Fold AI-generated outfit proposals into the local ranking pipeline.

The generation service answers with item ids chosen from the wardrobe it was
shown. Those ids are resolved against the live wardrobe (unknown ids are
dropped), and every surviving outfit is scored by the same composite scorer
as locally generated candidates, so both sources rank on one scale.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from logic.outfit_builder import DEFAULT_LIMITS, MIN_OUTFIT_ITEMS, EngineLimits
from logic.ranking import rank_outfits, score_and_rank
from logic.validation import AIOutfitResponse
from models.clothing_item import ClothingItem
from models.ingestion_mapping import parse_analysis_text
from models.outfit import CandidateOutfit, OutfitSuggestion
from models.preferences import PreferenceProfile
from models.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


@dataclass
class AIReconciliationResult:
    suggestions: List[OutfitSuggestion]
    fallback_used: bool
    dropped_item_ids: List[str] = field(default_factory=list)
    general_tips: Optional[str] = None


def _parse_response(payload: Union[str, Dict[str, Any], None]) -> Optional[AIOutfitResponse]:
    if payload is None:
        return None
    try:
        raw = parse_analysis_text(payload) if isinstance(payload, str) else payload
        return AIOutfitResponse.model_validate(raw)
    except (ValueError, ValidationError) as exc:
        logger.warning("Discarding unparseable AI outfit response: %s", exc)
        return None


def candidates_from_ai(
    response: AIOutfitResponse, wardrobe: Sequence[ClothingItem]
) -> tuple[List[CandidateOutfit], List[str]]:
    """Resolve proposal ids to items; returns candidates and the ids that were dropped."""

    by_id = {item.item_id: item for item in wardrobe}
    candidates: List[CandidateOutfit] = []
    dropped: List[str] = []
    for outfit in response.outfits:
        items: List[ClothingItem] = []
        for item_id in outfit.item_ids:
            item = by_id.get(item_id)
            if item is None:
                dropped.append(item_id)
            elif item not in items:
                items.append(item)
        if len(items) < MIN_OUTFIT_ITEMS:
            logger.info("Skipping AI outfit %r with %s usable items", outfit.name, len(items))
            continue
        base = outfit.reasoning or outfit.name or "Stylist-curated combination"
        clauses = [base.strip().rstrip(".")]
        if outfit.style_notes:
            clauses.append(outfit.style_notes.strip().rstrip("."))
        candidates.append(CandidateOutfit(items=items, clauses=clauses, source="ai"))
    return candidates, dropped


def reconcile_ai_outfits(
    payload: Union[str, Dict[str, Any], None],
    wardrobe: Sequence[ClothingItem],
    weather: Optional[WeatherSnapshot] = None,
    preferences: Optional[PreferenceProfile] = None,
    limits: EngineLimits = DEFAULT_LIMITS,
) -> AIReconciliationResult:
    """Rank AI proposals, falling back to the local engine when none survive."""

    response = _parse_response(payload)
    candidates: List[CandidateOutfit] = []
    dropped: List[str] = []
    if response is not None:
        candidates, dropped = candidates_from_ai(response, wardrobe)
    if dropped:
        logger.warning("AI response referenced %s unknown item ids", len(dropped))

    if not candidates:
        logger.info("No usable AI outfits, falling back to local ranking")
        return AIReconciliationResult(
            suggestions=rank_outfits(wardrobe, weather, preferences, limits),
            fallback_used=True,
            dropped_item_ids=dropped,
            general_tips=response.general_tips if response else None,
        )
    return AIReconciliationResult(
        suggestions=score_and_rank(candidates, weather, preferences, limits.max_suggestions),
        fallback_used=False,
        dropped_item_ids=dropped,
        general_tips=response.general_tips if response else None,
    )


__all__ = ["AIReconciliationResult", "candidates_from_ai", "reconcile_ai_outfits"]
