"""
Tests for settings loading
"""

from dicegraph.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_port == 4000
    assert settings.graphiql is True
    assert settings.environment == "development"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DICEGRAPH_API_PORT", "5050")
    monkeypatch.setenv("DICEGRAPH_GRAPHIQL", "false")
    monkeypatch.setenv("dicegraph_environment", "production")

    settings = Settings(_env_file=None)

    assert settings.api_port == 5050
    assert settings.graphiql is False
    assert settings.environment == "production"


def test_list_settings_parse_json(monkeypatch):
    monkeypatch.setenv("DICEGRAPH_CORS_ORIGINS", '["http://a.test", "http://b.test"]')

    assert Settings(_env_file=None).cors_origins == ["http://a.test", "http://b.test"]
