import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_selection(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_testing_settings_define_required_sections():
    settings = importlib.import_module("config.testing")

    assert settings.TESTING is True
    assert {"host", "port", "user", "password", "database"} <= set(settings.DB_CONFIG)
    assert settings.KEYCLOAK_CONFIG["timeout_seconds"] > 0
