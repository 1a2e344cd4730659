"""Model package exports."""

from models.clothing_item import ClothingItem
from models.outfit import CandidateOutfit, OutfitSuggestion, SavedOutfit
from models.preferences import PreferenceProfile
from models.taxonomy import *  # noqa: F401,F403
from models.weather import WeatherOutlook, WeatherSnapshot

__all__ = [
    "ClothingItem",
    "CandidateOutfit",
    "OutfitSuggestion",
    "SavedOutfit",
    "PreferenceProfile",
    "WeatherOutlook",
    "WeatherSnapshot",
]
