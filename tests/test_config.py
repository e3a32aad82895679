import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "app_env, expected",
    [
        ("production", "config.production"),
        (" PROD ", "config.production"),
        ("ci", "config.testing"),
        ("testing", "config.testing"),
        ("mock", "config.development"),
        ("something-else", "config.development"),
    ],
)
def test_app_env_selects_settings_module(monkeypatch, app_env, expected):
    monkeypatch.delenv("SETTINGS_MODULE", raising=False)
    monkeypatch.setenv("APP_ENV", app_env)

    assert get_settings_module() == expected


def test_default_is_development(monkeypatch):
    monkeypatch.delenv("SETTINGS_MODULE", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_settings_module_overrides_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SETTINGS_MODULE", "config.testing")

    assert get_settings_module() == "config.testing"
