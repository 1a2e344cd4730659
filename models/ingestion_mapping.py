"""Mapping from vision-analysis output to :class:`ClothingItem`."""

from __future__ import annotations

import json
import logging
import re
import uuid
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from logic.validation import ClothingAnalysisPayload
from models.clothing_item import ClothingItem
from models.taxonomy import Category, WarmthLevel

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\s*|\s*```")


def parse_analysis_text(text: str) -> Dict[str, Any]:
    """Decode model output, tolerating a surrounding markdown code fence.

    Raises a :class:`ValueError` when the text is not a JSON object.
    """

    cleaned = _CODE_FENCE.sub("", text or "").strip()
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid response format from AI analysis") from exc
    if not isinstance(payload, dict):
        raise ValueError("AI analysis must be a JSON object")
    return payload


def map_analysis_to_clothing_item(
    user_id: str,
    analysis: Union[str, Dict[str, Any]],
    item_id: Optional[str] = None,
    image_url: Optional[str] = None,
) -> ClothingItem:
    """Validate an analysis payload and turn it into an immutable item.

    Raises a :class:`ValueError` if category, colour or warmth are missing.
    Out-of-vocabulary enum values are kept as their fallback members so the
    item still ranks, just without the matching bonuses.
    """

    raw = parse_analysis_text(analysis) if isinstance(analysis, str) else dict(analysis)
    try:
        validated = ClothingAnalysisPayload.model_validate(raw)
    except ValidationError as exc:
        missing = sorted({str(error["loc"][0]) for error in exc.errors() if error.get("loc")})
        raise ValueError(f"Missing required fields in AI analysis: {missing}") from exc

    record = validated.model_dump()
    record.update(
        item_id=item_id or str(uuid.uuid4()),
        user_id=user_id,
        image_url=image_url or record.get("image_url"),
    )
    item = ClothingItem.from_record(record)
    if item.category is Category.OTHER or item.warmth_level is WarmthLevel.UNSPECIFIED:
        logger.warning(
            "Analysis produced unrecognised labels",
            extra={"category": validated.category, "warmth_level": validated.warmth_level},
        )
    logger.debug(
        "Mapped analysis to ClothingItem",
        extra={"item_id": item.item_id, "category": item.category.value, "confidence": validated.confidence},
    )
    return item


__all__ = ["parse_analysis_text", "map_analysis_to_clothing_item"]
