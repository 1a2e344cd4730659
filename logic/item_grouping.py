"""Partition a wardrobe into category buckets ordered by desirability."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from models.clothing_item import ClothingItem
from models.taxonomy import Category, ComplimentFrequency, ConditionStatus

logger = logging.getLogger(__name__)

BASE_ITEM_SCORE = 50
VERSATILITY_WEIGHT = 5

CONDITION_BONUS = {
    ConditionStatus.EXCELLENT: 15,
    ConditionStatus.GOOD: 10,
    ConditionStatus.FAIR: 5,
}

COMPLIMENT_BONUS = {
    ComplimentFrequency.ALWAYS: 20,
    ComplimentFrequency.OFTEN: 15,
    ComplimentFrequency.SOMETIMES: 10,
}


def item_desirability(item: ClothingItem) -> int:
    """Score how eagerly an item should be picked within its category."""

    score = BASE_ITEM_SCORE
    if item.versatility_score:
        score += VERSATILITY_WEIGHT * item.versatility_score
    score += CONDITION_BONUS.get(item.condition_status, 0)
    score += COMPLIMENT_BONUS.get(item.compliment_frequency, 0)
    return score


def group_items(items: Iterable[ClothingItem]) -> Dict[Category, List[ClothingItem]]:
    """Bucket items by category, each bucket sorted best-first.

    Only categories that occur are present. The sort is stable, so equally
    desirable items keep their input order. Items with an unrecognised
    category land in the ``Category.OTHER`` bucket, which the generator never
    reads.
    """

    grouped: Dict[Category, List[ClothingItem]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    for bucket in grouped.values():
        bucket.sort(key=item_desirability, reverse=True)
    logger.debug(
        "Grouped wardrobe into %s",
        {category.value: len(bucket) for category, bucket in grouped.items()},
    )
    return grouped


__all__ = ["item_desirability", "group_items", "CONDITION_BONUS", "COMPLIMENT_BONUS"]
