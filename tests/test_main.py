"""Demo entrypoint wiring of config, logging and weather provider."""

import json
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import main
from tools import weather_provider
from tools.weather_provider import OpenMeteoProvider


def _clear_env(monkeypatch):
    for key in ("APP_ENV", "APP_CONFIG_PATH", "WEATHER_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_demo_uses_configured_log_level(monkeypatch, capsys):
    _clear_env(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "error")
    levels = []
    monkeypatch.setattr(main, "configure_logging", levels.append)

    main.main([])

    output = json.loads(capsys.readouterr().out)
    assert levels == ["ERROR"]
    assert output["weather"]["city"] == "Amsterdam"
    assert output["suggestions"]


def test_city_argument_uses_live_provider_from_config(monkeypatch, capsys):
    _clear_env(monkeypatch)
    monkeypatch.setenv("WEATHER_TIMEOUT_SECONDS", "0.5")
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    built = []
    original = OpenMeteoProvider.from_config.__func__

    def spy(cls, config):
        provider = original(cls, config)
        built.append(provider)
        return provider

    monkeypatch.setattr(OpenMeteoProvider, "from_config", classmethod(spy))
    monkeypatch.setattr(weather_provider.requests, "get", _offline)

    main.main(["Oslo"])

    output = json.loads(capsys.readouterr().out)
    assert [provider.timeout_seconds for provider in built] == [0.5]
    assert output["weather"] is None
    assert output["suggestions"]


def _offline(url, params=None, timeout=None):
    raise weather_provider.requests.ConnectionError("offline")
