"""Tests for portfolio_content.config — env overrides defaults."""

from __future__ import annotations

from portfolio_content.config import Settings


def test_defaults() -> None:
    s = Settings()
    assert s.WP_API_URL == "https://tu-sitio.com/wp-json"
    assert s.LOCALE == "es"
    assert s.SKILL_FALLBACK_CATEGORY == "Other"


def test_env_overrides_base_url(monkeypatch) -> None:
    monkeypatch.setenv("WP_API_URL", "https://blog.example.test/wp-json")
    assert Settings().WP_API_URL == "https://blog.example.test/wp-json"


def test_env_coerces_types(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.test, https://b.test")
    s = Settings()
    assert s.PORT == 9000
    assert s.DEBUG is True
    assert s.CORS_ORIGINS == ["https://a.test", "https://b.test"]
