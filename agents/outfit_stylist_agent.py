"""Outfit stylist service wrapping the deterministic ranking engine."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from logic.ai_suggestions import reconcile_ai_outfits
from logic.outfit_builder import EngineLimits
from logic.ranking import rank_outfits
from logic.validation import OutfitSuggestionRequest, validation_failure
from models.clothing_item import ClothingItem
from models.outfit import OutfitSuggestion
from models.preferences import PreferenceProfile
from models.weather import WeatherSnapshot
from stylist_app.config import StylistConfig
from stylist_app.logging_config import get_logger, log_event, operation_context, summarize_suggestions
from tools.weather_provider import WeatherProvider

logger = get_logger(__name__)

ItemLike = Union[ClothingItem, Dict[str, Any]]


class OutfitStylistAgent:
    """Builds ranked outfit suggestions for one user's wardrobe.

    The agent owns the I/O around the engine: it coerces raw records into
    items, resolves the weather (explicit snapshot, then a provider lookup by
    city, then none) and shapes the JSON-ready response. Ranking itself is
    delegated to :func:`logic.ranking.rank_outfits`.
    """

    def __init__(self, config: StylistConfig, weather_provider: Optional[WeatherProvider] = None) -> None:
        self.config = config
        self.weather_provider = weather_provider
        self.limits = EngineLimits(max_suggestions=config.max_suggestions)

    def recommend_outfits(
        self,
        user_id: str,
        items: Iterable[ItemLike],
        weather: Optional[WeatherSnapshot] = None,
        preferences: Optional[PreferenceProfile] = None,
        city: Optional[str] = None,
        ai_response: Union[str, Dict[str, Any], None] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, object]:
        """Return ranked suggestions, the weather used and a short rationale."""

        limits = self.limits
        if limit is not None:
            limits = EngineLimits(max_suggestions=max(1, min(limit, self.config.max_suggestions)))

        with operation_context("agent:stylist.recommend_outfits", logger=logger, user_id=user_id) as correlation_id:
            log_event(
                logger,
                level=logging.INFO,
                event="agent_call_started",
                agent="stylist",
                method="recommend_outfits",
                correlation_id=correlation_id,
                user_id=user_id,
            )
            wardrobe, skipped = self._coerce_items(items, user_id)
            resolved_weather = weather or self._lookup_weather(city or self.config.default_city)

            fallback_used: Optional[bool] = None
            dropped_ids: List[str] = []
            general_tips: Optional[str] = None
            if ai_response is not None:
                result = reconcile_ai_outfits(ai_response, wardrobe, resolved_weather, preferences, limits)
                suggestions = result.suggestions
                fallback_used = result.fallback_used
                dropped_ids = result.dropped_item_ids
                general_tips = result.general_tips
            else:
                suggestions = rank_outfits(wardrobe, resolved_weather, preferences, limits)

            response = {
                "status": "ok",
                "suggestions": [suggestion.to_dict() for suggestion in suggestions],
                "weather": resolved_weather.to_dict() if resolved_weather else None,
                "user_facing_rationale": self._rationale(suggestions, resolved_weather),
                "general_tips": general_tips,
                "debug_summary": {
                    "wardrobe_size": len(wardrobe),
                    "skipped_records": skipped,
                    "ai_fallback_used": fallback_used,
                    "dropped_item_ids": dropped_ids,
                    "scores": [suggestion.score for suggestion in suggestions],
                },
            }
            log_event(
                logger,
                level=logging.INFO,
                event="agent_call_completed",
                agent="stylist",
                method="recommend_outfits",
                correlation_id=correlation_id,
                outfit_count=len(suggestions),
                outfits=summarize_suggestions(suggestions),
                skipped=len(skipped),
            )
            return response

    def handle_request(self, payload: Dict[str, Any]) -> Dict[str, object]:
        """Validate a raw request envelope and run :meth:`recommend_outfits`."""

        try:
            request = OutfitSuggestionRequest.model_validate(payload)
        except ValidationError as exc:
            log_event(logger, logging.WARNING, "request_validation_failed", errors=len(exc.errors()))
            return validation_failure("Outfit request failed validation", exc)

        weather = WeatherSnapshot(**request.weather.model_dump()) if request.weather else None
        preferences = PreferenceProfile.from_record(request.preferences.model_dump()) if request.preferences else None
        return self.recommend_outfits(
            user_id=request.user_id,
            items=request.items,
            weather=weather,
            preferences=preferences,
            city=request.city,
            ai_response=request.ai_response,
            limit=request.limit,
        )

    def _lookup_weather(self, city: Optional[str]) -> Optional[WeatherSnapshot]:
        if not city or self.weather_provider is None:
            return None
        try:
            return self.weather_provider.get_current_weather(city)
        except ValueError as exc:
            logger.warning("Skipping weather lookup: %s", exc)
            return None

    def _coerce_items(self, raw_items: Iterable[ItemLike], user_id: str) -> tuple[List[ClothingItem], List[str]]:
        items: List[ClothingItem] = []
        skipped: List[str] = []
        for raw in raw_items:
            if isinstance(raw, ClothingItem):
                items.append(raw)
                continue
            try:
                items.append(ClothingItem.from_record({"user_id": user_id, **raw}))
            except (TypeError, ValueError) as exc:
                logger.warning("Skipping wardrobe entry due to validation error: %s", exc)
                record_id = raw.get("id") or raw.get("item_id") if isinstance(raw, dict) else None
                skipped.append(str(record_id or "<missing id>"))
        return items, skipped

    @staticmethod
    def _rationale(suggestions: List[OutfitSuggestion], weather: Optional[WeatherSnapshot]) -> str:
        if not suggestions:
            return "Add a few more pieces to your wardrobe to get outfit suggestions."
        conditions = (
            f"{weather.temperature:g}°C and {weather.condition.lower()}" if weather else "no weather data"
        )
        return f"Generated {len(suggestions)} outfits for {conditions}; best score {suggestions[0].score:g}."


__all__ = ["OutfitStylistAgent"]
