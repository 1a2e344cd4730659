"""Run the outfit ranking engine against a sample wardrobe."""

import json
import sys

from agents.outfit_stylist_agent import OutfitStylistAgent
from models.weather import WeatherSnapshot
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging
from tools.weather_provider import MockWeatherProvider, OpenMeteoProvider, WeatherProvider

SAMPLE_WARDROBE = [
    {"id": "tee-white", "category": "top", "color": "White", "warmth_level": "light", "tags": ["basic"],
     "versatility_score": 9, "condition_status": "Excellent", "texture": "Soft"},
    {"id": "knit-green", "category": "top", "color": "Olive Green", "warmth_level": "medium", "tags": [],
     "style_aesthetic": ["Casual"], "pattern_design": "Solid", "texture": "Rough"},
    {"id": "jeans-navy", "category": "bottom", "color": "Navy", "warmth_level": "medium", "tags": ["denim"],
     "versatility_score": 8, "style_aesthetic": ["Streetwear"]},
    {"id": "sneakers-white", "category": "shoes", "color": "White", "warmth_level": "light", "tags": []},
    {"id": "trench-beige", "category": "outerwear", "color": "Beige", "warmth_level": "medium", "tags": [],
     "water_resistance": "Water Repellent", "layering_position": "Outer Layer"},
]


def main(argv: list[str] | None = None) -> None:
    """Rank the sample wardrobe; pass a city name to use live Open-Meteo weather."""

    args = sys.argv[1:] if argv is None else argv
    config = StylistConfig.from_env()
    configure_logging(config.log_level)
    provider: WeatherProvider
    if args:
        city = " ".join(args)
        provider = OpenMeteoProvider.from_config(config)
    else:
        city = "Amsterdam"
        provider = MockWeatherProvider(WeatherSnapshot(temperature=9, condition="Drizzle", city=city))
    agent = OutfitStylistAgent(config, weather_provider=provider)
    response = agent.recommend_outfits(user_id="demo", items=SAMPLE_WARDROBE, city=city)
    print(json.dumps(response, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
