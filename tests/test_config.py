"""Tests for configuration parsing."""

import logging

import pytest

from athlete_nutrition.config import Settings, parse_log_level


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, logging.INFO),
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("10", 10),
        ("nonsense", logging.INFO),
    ],
)
def test_parse_log_level(raw: str | None, expected: int) -> None:
    assert parse_log_level(raw) == expected


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ATHLETE_NUTRITION_MIN_CALORIES", raising=False)

    settings = Settings(_env_file=None)

    assert settings.default_max_results == 20
    assert settings.min_calories == 1200
    assert (settings.min_weight_kg, settings.max_weight_kg) == (30, 300)


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ATHLETE_NUTRITION_MIN_CALORIES", "1500")
    monkeypatch.setenv("ATHLETE_NUTRITION_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.min_calories == 1500
    assert parse_log_level(settings.log_level) == logging.DEBUG
