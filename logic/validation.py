"""Pydantic schemas for validating payloads that cross into the engine."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from stylist_app.config import MAX_SUGGESTIONS


class WeatherPayload(BaseModel):
    """Weather snapshot as sent by the web client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    temperature: float
    condition: str = "clear"
    description: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = Field(default=None, alias="windSpeed")
    city: Optional[str] = None


class PreferencePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    preferred_colors: List[str] = []
    preferred_categories: List[str] = []


class OutfitSuggestionRequest(BaseModel):
    """Envelope for a ranking request from the application shell."""

    user_id: str = Field(min_length=1)
    items: List[Dict[str, Any]] = []
    weather: Optional[WeatherPayload] = None
    preferences: Optional[PreferencePayload] = None
    city: Optional[str] = None
    ai_response: Optional[Union[str, Dict[str, Any]]] = None
    limit: int = Field(default=MAX_SUGGESTIONS, ge=1, le=MAX_SUGGESTIONS)


class ClothingAnalysisPayload(BaseModel):
    """Structured attributes returned by the vision analysis service."""

    model_config = ConfigDict(extra="allow")

    category: str = Field(min_length=1)
    color: str = Field(min_length=1)
    warmth_level: str = Field(min_length=1)
    tags: List[str] = []
    style_aesthetic: List[str] = []
    season: List[str] = []
    confidence: Optional[float] = Field(default=None, ge=0, le=1)

    @field_validator("tags", "style_aesthetic", "season", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class AIOutfitPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    item_ids: List[str] = []
    reasoning: Optional[str] = None
    style_notes: Optional[str] = None
    confidence: Optional[float] = None

    @field_validator("item_ids", mode="before")
    @classmethod
    def _stringify_ids(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(item_id) for item_id in value]
        return value


class AIOutfitResponse(BaseModel):
    """Outfit proposals returned by the AI generation service."""

    model_config = ConfigDict(extra="ignore")

    outfits: List[AIOutfitPayload] = []
    general_tips: Optional[str] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "WeatherPayload",
    "PreferencePayload",
    "OutfitSuggestionRequest",
    "ClothingAnalysisPayload",
    "AIOutfitPayload",
    "AIOutfitResponse",
    "ValidationResult",
    "validation_failure",
]
