"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.ranking import rank_outfits
from models.clothing_item import ClothingItem
from models.outfit import OutfitSuggestion


def _evaluate_expectations(expectations: Dict[str, object], outfits: List[OutfitSuggestion]) -> Dict[str, bool]:
    checks: Dict[str, bool] = {}
    checks["bounded"] = len(outfits) <= 5
    checks["non_negative"] = all(outfit.score >= 0 for outfit in outfits)
    checks["sorted"] = all(a.score >= b.score for a, b in zip(outfits, outfits[1:]))
    if "exact_outfits" in expectations:
        checks["exact_outfits"] = len(outfits) == expectations["exact_outfits"]
    if "first_item_ids" in expectations:
        checks["first_item_ids"] = bool(outfits) and outfits[0].item_ids == expectations["first_item_ids"]
    if "min_top_score" in expectations:
        checks["min_top_score"] = bool(outfits) and outfits[0].score >= float(expectations["min_top_score"])
    if "first_contains" in expectations:
        checks["first_contains"] = bool(outfits) and expectations["first_contains"] in outfits[0].item_ids
    if "reasoning_mentions" in expectations:
        needle = str(expectations["reasoning_mentions"]).lower()
        checks["reasoning_mentions"] = bool(outfits) and needle in outfits[0].reasoning.lower()
    if expectations.get("strictly_ordered"):
        checks["strictly_ordered"] = len(outfits) >= 2 and outfits[0].score > outfits[1].score
    return checks


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    wardrobe = [ClothingItem.from_record(record) for record in scenario.wardrobe_items]
    outfits = rank_outfits(wardrobe, scenario.weather, scenario.preferences)
    repeat = rank_outfits(wardrobe, scenario.weather, scenario.preferences)
    checks = _evaluate_expectations(scenario.expectations, outfits)
    checks["deterministic"] = outfits == repeat
    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "outfit_count": len(outfits),
        "outfits": [outfit.to_dict() for outfit in outfits],
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
