"""Configuration helpers for the wardrobe stylist service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_WEATHER_BASE_URL = "https://api.open-meteo.com/v1"
DEFAULT_GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1"
MAX_SUGGESTIONS = 5


@dataclass
class StylistConfig:
    """Configuration values for the stylist service.

    Only the collaborators around the ranking engine are configurable: the
    weather lookup endpoints, the default city used when a request carries no
    location, and how many suggestions are returned. The engine itself is a
    pure function and reads nothing from here.
    """

    weather_base_url: str = DEFAULT_WEATHER_BASE_URL
    geocoding_base_url: str = DEFAULT_GEOCODING_BASE_URL
    weather_timeout_seconds: float = 5.0
    default_city: Optional[str] = None
    max_suggestions: int = MAX_SUGGESTIONS
    log_level: str = "INFO"
    environment: str | None = None

    def __post_init__(self) -> None:
        self.max_suggestions = max(1, min(MAX_SUGGESTIONS, int(self.max_suggestions)))

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment file.

        Environment specific files live in ``config/environments/<env>.yaml``
        by default. Environment variables always win over file values.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        file_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            file_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            return os.getenv(key.upper(), file_config.get(key, default))

        timeout = get_value("weather_timeout_seconds", "5.0")
        max_suggestions = get_value("max_suggestions", str(MAX_SUGGESTIONS))

        return cls(
            weather_base_url=str(get_value("weather_base_url") or DEFAULT_WEATHER_BASE_URL),
            geocoding_base_url=str(get_value("geocoding_base_url") or DEFAULT_GEOCODING_BASE_URL),
            weather_timeout_seconds=_as_float(timeout, 5.0),
            default_city=get_value("default_city") or None,
            max_suggestions=_as_int(max_suggestions, MAX_SUGGESTIONS),
            log_level=str(get_value("log_level") or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
                value = value[1:-1]
            config[key.strip()] = value
        return config


def _as_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


def _as_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default
