"""Weather value objects consumed by the outfit engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from models.taxonomy import WarmthLevel

DEFAULT_TEMPERATURE_C = 20.0
DEFAULT_CONDITION = "clear"

WARMTH_SCORES = {
    WarmthLevel.LIGHT: 1,
    WarmthLevel.MEDIUM: 2,
    WarmthLevel.HEAVY: 3,
}


def warmth_score(level: WarmthLevel) -> int:
    """Numeric insulation of a warmth level; unknown levels count as light."""

    return WARMTH_SCORES.get(level, 1)


@dataclass(frozen=True)
class WeatherSnapshot:
    """Ambient conditions at suggestion time."""

    temperature: float
    condition: str
    description: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    city: Optional[str] = None

    @property
    def condition_text(self) -> str:
        return (self.condition or "").lower()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "WeatherSnapshot":
        """Accept the camelCase keys used by the web client as well."""

        temperature = record.get("temperature")
        return cls(
            temperature=float(temperature) if temperature is not None else DEFAULT_TEMPERATURE_C,
            condition=str(record.get("condition") or DEFAULT_CONDITION),
            description=record.get("description"),
            humidity=record.get("humidity"),
            wind_speed=record.get("wind_speed", record.get("windSpeed")),
            city=record.get("city"),
        )


@dataclass(frozen=True)
class WeatherOutlook:
    """Clothing-relevant classification of a snapshot, computed once per call."""

    temperature: float
    condition: str
    is_cold: bool
    is_warm: bool
    is_raining: bool
    is_snowing: bool
    target_warmth: WarmthLevel

    @property
    def needs_outer_layer(self) -> bool:
        return self.is_cold or self.is_raining or self.is_snowing

    @property
    def target_warmth_score(self) -> int:
        return warmth_score(self.target_warmth)

    @classmethod
    def from_snapshot(cls, weather: Optional[WeatherSnapshot]) -> "WeatherOutlook":
        temperature = weather.temperature if weather is not None else DEFAULT_TEMPERATURE_C
        condition = weather.condition_text if weather is not None else DEFAULT_CONDITION
        if temperature < 5:
            target = WarmthLevel.HEAVY
        elif temperature < 15:
            target = WarmthLevel.MEDIUM
        else:
            target = WarmthLevel.LIGHT
        return cls(
            temperature=temperature,
            condition=condition,
            is_cold=temperature < 10,
            is_warm=temperature > 25,
            is_raining="rain" in condition or "drizzle" in condition,
            is_snowing="snow" in condition,
            target_warmth=target,
        )


__all__ = [
    "WeatherSnapshot",
    "WeatherOutlook",
    "WARMTH_SCORES",
    "warmth_score",
    "DEFAULT_TEMPERATURE_C",
    "DEFAULT_CONDITION",
]
