"""Colour coordination rules for free-text garment colours."""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

NEUTRAL_COLORS: Tuple[str, ...] = ("black", "white", "gray", "grey", "beige", "brown", "navy")

COMPLEMENTARY_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("blue", "white"),
    ("blue", "black"),
    ("blue", "gray"),
    ("red", "black"),
    ("red", "white"),
    ("red", "gray"),
    ("green", "brown"),
    ("green", "beige"),
    ("green", "white"),
    ("yellow", "blue"),
    ("yellow", "brown"),
    ("yellow", "white"),
    ("purple", "black"),
    ("purple", "white"),
    ("purple", "gray"),
)


def _normalise(color: str | None) -> str:
    return " ".join(str(color or "").lower().split())


def is_neutral(color: str | None) -> bool:
    """Return True for shades built on a neutral base, e.g. ``"Navy Blue"``."""

    text = _normalise(color)
    return bool(text) and any(neutral in text for neutral in NEUTRAL_COLORS)


def complementary(color1: str | None, color2: str | None) -> bool:
    """Return True when the two colours contain a listed complementary pair."""

    c1, c2 = _normalise(color1), _normalise(color2)
    if not c1 or not c2:
        return False
    return any((a in c1 and b in c2) or (a in c2 and b in c1) for a, b in COMPLEMENTARY_PAIRS)


def colors_match(color1: str | None, color2: str | None) -> bool:
    """Case-insensitive colour match: neutrals, identical shades or complements."""

    c1, c2 = _normalise(color1), _normalise(color2)
    if is_neutral(c1) or is_neutral(c2):
        result = True
    elif c1 == c2:
        result = True
    else:
        result = complementary(c1, c2)
    logger.debug("colour match (%s, %s) -> %s", c1, c2, result)
    return result


def clashing_pairs(colors: Sequence[str]) -> List[Tuple[str, str]]:
    """Every unordered pair in ``colors`` that does not match."""

    clashes = []
    for index, first in enumerate(colors):
        for second in colors[index + 1:]:
            if not colors_match(first, second):
                clashes.append((first, second))
    return clashes


def palette_is_coordinated(colors: Iterable[str]) -> bool:
    return not clashing_pairs([color for color in colors if color])


__all__ = [
    "NEUTRAL_COLORS",
    "COMPLEMENTARY_PAIRS",
    "is_neutral",
    "complementary",
    "colors_match",
    "clashing_pairs",
    "palette_is_coordinated",
]
